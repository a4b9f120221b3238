"""Lexeme extraction for source code.

Splits code into lexemes and groups the unique ones by category. String
literals and comments are matched first and kept whole, so an operator or a
keyword inside them never leaks into the other categories:

- 'url = "https://api.com"' → IDENTIFIER {'url'}, OPERATOR {'='},
  STRING {'"https://api.com"'}
- x >= 100  # limit → IDENTIFIER {'x'}, OPERATOR {'>='}, NUMBER {'100'},
  COMMENT {'# limit'}
"""

from __future__ import annotations

import keyword
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple, Union

import regex as re


class LexemeCategory(str, Enum):
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"
    NUMBER = "number"
    STRING = "string"
    COMMENT = "comment"
    DELIMITER = "delimiter"
    ALL = "all"  # Filter value only, never a key of analyze() results


CategoryFilter = Optional[Union[LexemeCategory, str]]


class LexemeAnalyzer:
    KEYWORDS = frozenset(keyword.kwlist)

    OPERATORS = [
        '==', '!=', '<=', '>=',
        '+=', '-=', '*=', '/=', '//=', '%=', '**=', '&=', '|=', '^=', '>>=', '<<=', ':=',
        '//', '**', '->', '<<', '>>', '...',
        '+', '-', '*', '/', '%', '=', '<', '>', '&', '|', '^', '~', '@', '!',
    ]

    DELIMITERS = frozenset('()[]{},:;.')

    # Strings and comments in one alternation: whichever starts first wins,
    # so a '#' inside a string or a quote inside a comment stays where it is.
    PROTECTED_PATTERN = re.compile(
        r'(?P<string>(?:(?<![\p{L}\p{N}_])[rbfuRBFU]{1,2})?'
        r'(?:"""[\s\S]*?"""|'
        r"'''[\s\S]*?'''|"
        r'"[^"\\\n]*(?:\\.[^"\\\n]*)*"|'
        r"'[^'\\\n]*(?:\\.[^'\\\n]*)*'))|"
        r'(?P<comment>#[^\n]*)'
    )

    IDENTIFIER_PATTERN = re.compile(r'[\p{L}_][\p{L}\p{N}_]*')

    NUMBER_PATTERN = re.compile(
        r'0[xX][0-9a-fA-F_]+|'  # Hex
        r'0[bB][01_]+|'  # Binary
        r'0[oO][0-7_]+|'  # Octal
        r'\d[\d_]*\.\d*(?:[eE][+-]?\d+)?|'  # Float
        r'\.\d+(?:[eE][+-]?\d+)?|'
        r'\d[\d_]*(?:[eE][+-]?\d+)?'  # Integer
    )

    def __init__(self):
        self.operators_sorted = sorted(self.OPERATORS, key=len, reverse=True)

    @staticmethod
    def coerce_category(value: CategoryFilter) -> Optional[LexemeCategory]:
        """Normalize a category filter.

        ``None`` and ``LexemeCategory.ALL`` both mean "no filter" and are
        returned as ``None``.

        Raises:
            ValueError: If ``value`` names no known category
        """
        if value is None:
            return None
        if not isinstance(value, LexemeCategory):
            value = LexemeCategory(value.lower())
        if value == LexemeCategory.ALL:
            return None
        return value

    def tokenize(self, code: str) -> List[Tuple[str, LexemeCategory]]:
        """Split code into ``(lexeme, category)`` pairs in source order.

        Whitespace is dropped.
        """
        if not code:
            return []

        lexemes: List[Tuple[str, LexemeCategory]] = []
        pos = 0
        for match in self.PROTECTED_PATTERN.finditer(code):
            if pos < match.start():
                lexemes.extend(self._tokenize_code(code[pos:match.start()]))
            category = LexemeCategory.STRING if match.group("string") else LexemeCategory.COMMENT
            lexemes.append((match.group(), category))
            pos = match.end()

        if pos < len(code):
            lexemes.extend(self._tokenize_code(code[pos:]))

        return lexemes

    def _tokenize_code(self, text: str) -> List[Tuple[str, LexemeCategory]]:
        lexemes = []
        i = 0

        while i < len(text):
            if text[i].isspace():
                i += 1
                continue

            num_match = self.NUMBER_PATTERN.match(text, i)
            if num_match:
                lexemes.append((num_match.group(), LexemeCategory.NUMBER))
                i = num_match.end()
                continue

            matched_op = None
            for op in self.operators_sorted:
                if text.startswith(op, i):
                    matched_op = op
                    break

            if matched_op is not None:
                lexemes.append((matched_op, LexemeCategory.OPERATOR))
                i += len(matched_op)
                continue

            id_match = self.IDENTIFIER_PATTERN.match(text, i)
            if id_match:
                word = id_match.group()
                category = LexemeCategory.KEYWORD if word in self.KEYWORDS else LexemeCategory.IDENTIFIER
                lexemes.append((word, category))
                i = id_match.end()
                continue

            if text[i] in self.DELIMITERS:
                lexemes.append((text[i], LexemeCategory.DELIMITER))
            else:
                lexemes.append((text[i], LexemeCategory.OPERATOR))
            i += 1

        return lexemes

    def analyze(self, code: str, category: CategoryFilter = None) -> Dict[LexemeCategory, Set[str]]:
        """Group the unique lexemes of ``code`` by category.

        Args:
            code: Source code text
            category: Only collect this category. ``None`` or
                ``LexemeCategory.ALL`` collects every category.

        Returns:
            Mapping of category to its set of unique lexemes. With a filter the
            mapping holds exactly that category, possibly with an empty set;
            without one only non-empty categories are present.
        """
        wanted = self.coerce_category(category)

        result: Dict[LexemeCategory, Set[str]] = {}
        if wanted is not None:
            result[wanted] = set()

        for lexeme, lexeme_category in self.tokenize(code):
            if wanted is not None and lexeme_category != wanted:
                continue
            result.setdefault(lexeme_category, set()).add(lexeme)

        return result


def analyze_code(code: str, category: CategoryFilter = None) -> Dict[LexemeCategory, Set[str]]:
    analyzer = LexemeAnalyzer()
    return analyzer.analyze(code, category)
