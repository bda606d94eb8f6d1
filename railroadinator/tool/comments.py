# Copyright (c) 2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import regex as re

# A doc comment must not contain '*/', otherwise the comment of the next rule
# could be attached to the previous one.
doc_comment_pattern = re.compile(r'/\*\*(?P<text>(?:(?!\*/).)*)\*/\s*(?:(?:fragment|public|private|protected)\s+)*(?P<name>[A-Za-z_][A-Za-z0-9_]*)\s*(?=[:\[@]|returns\b|locals\b|throws\b|options\b)', re.DOTALL)


def extract_comments(src):
    """
    Collect the documentation comments (``/** ... */``) that immediately
    precede rule definitions.

    :param str src: Source of the grammar.
    :return: Mapping from rule name to the text of its documentation comment.
    :rtype: dict[str, str]
    """
    comments = {}
    for match in doc_comment_pattern.finditer(src):
        lines = [re.sub(r'^\s*\*?\s?', '', line).rstrip() for line in match.group('text').split('\n')]
        text = '\n'.join(lines).strip()
        if text:
            comments[match.group('name')] = text
    return comments
