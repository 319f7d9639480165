# Copyright 2026 dbustree Contributors
# SPDX-License-Identifier: Apache-2.0

"""Text decoration strategies for rendered output.

The renderers only ever ask a style to mark a piece of text with its role
(path, interface, type, ...). Whether that results in terminal colors is
decided by the style that is passed in.
"""

from yachalk import chalk

# ###############
# Public Interface
# ###############


class PlainStyle:
    """Leaves every piece of text unchanged."""

    def path(self, text: str) -> str:
        return text

    def bus_name(self, text: str) -> str:
        return text

    def interface(self, text: str) -> str:
        return text

    def section(self, text: str) -> str:
        return text

    def annotation(self, text: str) -> str:
        return text

    def arg_name(self, text: str) -> str:
        return text

    def type(self, text: str) -> str:
        return text

    def access(self, text: str) -> str:
        return text

    def error(self, text: str) -> str:
        return text

    def pid(self, text: str) -> str:
        return text

    def cmdline(self, text: str) -> str:
        return text


class ChalkStyle(PlainStyle):
    """Colors text for a terminal using ``yachalk``."""

    def path(self, text: str) -> str:
        return chalk.bold(text)

    def bus_name(self, text: str) -> str:
        return chalk.bold(text)

    def interface(self, text: str) -> str:
        return chalk.green(text)

    def section(self, text: str) -> str:
        return chalk.yellow(text)

    def annotation(self, text: str) -> str:
        return chalk.magenta(text)

    def arg_name(self, text: str) -> str:
        return chalk.gray(text)

    def type(self, text: str) -> str:
        return chalk.blue(text)

    def access(self, text: str) -> str:
        return chalk.gray(text)

    def error(self, text: str) -> str:
        return chalk.red(text)

    def pid(self, text: str) -> str:
        return chalk.blue(text)

    def cmdline(self, text: str) -> str:
        return chalk.gray(text)


def get_style(color: bool) -> PlainStyle:
    """Return the colored style when *color* is set, the plain one otherwise."""
    return ChalkStyle() if color else PlainStyle()
