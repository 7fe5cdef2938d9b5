"""
settings.py

Package-wide defaults for huffcodec.
"""

# Enqueue leaves in ascending symbol order instead of the frequency table's
# iteration order when building a tree.
SORT_SYMBOLS = False

# Raw size of one input symbol, used for compression ratios.
BITS_PER_SYMBOL = 8

# Logger defaults.
DISPLAY_INFO = False
DISPLAY_PROGRESS = True
TREE_STEP_INTERVAL_COUNT = 100
CODING_STEP_INTERVAL_COUNT = 1000
DECODING_STEP_INTERVAL_COUNT = 1000
