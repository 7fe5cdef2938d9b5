import matplotlib.pyplot as plt
import numpy as np

from .huffman import code_lengths


class CodeDisplay:
    def __init__(self, table, code,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 bar_color='blue', bar_alpha=0.6,
                 length_color='red', length_linewidth=2):
        self.table = table
        self.code = code
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.bar_color = bar_color
        self.bar_alpha = bar_alpha
        self.length_color = length_color
        self.length_linewidth = length_linewidth

    def _finish(self, show_graph, save_path):
        plt.tight_layout()
        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close()

    def generate_frequency_plot(self, show_graph=False, save_path=None):
        title = "Symbol Frequency and Code Length"
        if not self.table:
            print(f"No data available for {title}.")
            return

        # Most frequent symbols first
        symbols = sorted(self.table, key=lambda s: -self.table[s])
        x = np.arange(len(symbols))
        frequencies = np.array([self.table[s] for s in symbols])
        lengths = np.array([len(self.code[s]) for s in symbols])

        fig, ax = plt.subplots(figsize=self.fig_size, dpi=self.dpi)
        ax.bar(x, frequencies, color=self.bar_color, alpha=self.bar_alpha, label="Frequency")
        ax.set_xticks(x)
        ax.set_xticklabels([repr(s) for s in symbols], rotation=90, fontsize=self.font_size - 4)
        ax.set_xlabel("Symbol", fontsize=self.font_size)
        ax.set_ylabel("Frequency", fontsize=self.font_size)

        length_ax = ax.twinx()
        length_ax.plot(x, lengths, color=self.length_color, linewidth=self.length_linewidth,
                       marker='o', label="Code length")
        length_ax.set_ylabel("Code length (bits)", fontsize=self.font_size)

        ax.set_title(title, fontsize=self.font_size + 2)
        ax.grid(True)
        fig.legend(fontsize=self.font_size)
        self._finish(show_graph, save_path)

    def generate_code_length_histogram(self, show_graph=False, save_path=None):
        title = "Code Length Distribution"
        lengths = list(code_lengths(self.code).values())
        if not lengths:
            print(f"No data available for {title}.")
            return

        bins = np.arange(min(lengths), max(lengths) + 2) - 0.5
        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.hist(lengths, bins=bins, color=self.bar_color, alpha=self.bar_alpha)
        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel("Code length (bits)", fontsize=self.font_size)
        plt.ylabel("Symbols", fontsize=self.font_size)
        plt.grid(True)
        self._finish(show_graph, save_path)
