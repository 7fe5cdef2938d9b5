from huffcodec.huffman import *
from huffcodec.logger import *
from huffcodec.statistics import CodingStatistics
from huffcodec.performance_display import CodeDisplay

lorem_ipsum_1par = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec a consectetur ligula. Nunc erat dolor, tristique sed sagittis quis, dignissim eget erat. Vivamus enim lorem, finibus sit amet maximus eget, condimentum sit amet massa. Fusce aliquet velit sit amet ex pretium, ut tincidunt dolor semper. Nulla pellentesque eget massa quis rhoncus. Curabitur maximus quis mauris vel sollicitudin. Integer tristique ut nisl sed consequat. Donec a ipsum ut sem cursus ullamcorper. Sed finibus, sapien id volutpat tempus, turpis odio placerat purus, sit amet scelerisque nibh sem a magna. Sed justo sem, facilisis at imperdiet eu, tincidunt vel quam. Ut id sollicitudin eros, sit amet bibendum tortor. Lorem ipsum dolor sit amet, consectetur adipiscing elit."


def main():
    print(f"Size of original data: {len(lorem_ipsum_1par)} symbols")

    logger = Logger()
    logger.display_info = True
    coding = encode(lorem_ipsum_1par, logger=logger)
    print(f"Size of encoded data: {coding.bit_length} bits")
    decoded = decode(coding.code, coding.data, logger=logger)

    if lorem_ipsum_1par == decoded:
        print("Data integrity preserved.")
    else:
        print("Data integrity compromised.")

    table = frequency_table(lorem_ipsum_1par)
    print(CodingStatistics.from_coding(table, coding.code))

    display = CodeDisplay(table, coding.code)
    display.generate_frequency_plot(show_graph=True)
    display.generate_code_length_histogram(show_graph=True)

if __name__ == "__main__":
    main()
