"""Print a score table row by row"""

import sys


class Table:
    def __init__(self, headers: list[str], formats: list[str], file=None):
        self.headers = list(headers)
        self.formats = ["{:" + f + "}" for f in formats]
        self.widths = [len(header) for header in self.headers]
        self.file = file if file is not None else sys.stdout
        self.rows = 0

    def format(self, *data) -> str:
        text = [self.formats[i].format(data[i]) for i in range(len(data))]
        if self.rows == 0:
            # the first row fixes the column widths
            for i, s in enumerate(text):
                self.widths[i] = max(self.widths[i], len(s))
                self.headers[i] = self.headers[i].center(self.widths[i])
        return " | ".join(t.rjust(self.widths[i]) for i, t in enumerate(text))

    def print(self, *data):
        first = self.rows == 0
        line = self.format(*data)
        if first:
            print(" | ".join(self.headers), file=self.file)
        print(line, file=self.file)
        self.rows += 1
