# Copyright (c) 2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

class RailroadError(Exception):
    """
    Base class of the errors raised by the tool.
    """


class RenderError(RailroadError):
    """
    Raised when the diagram of a rule cannot be rendered.
    """

    def __init__(self, rule, msg):
        """
        :param str rule: Name of the rule whose diagram failed to render.
        :param str msg: Description of the failure.
        """
        super().__init__(f'rendering rule {rule!r} failed: {msg}')
        self.rule = rule
