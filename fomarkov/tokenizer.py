"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import re
import string
import unicodedata

_BRACKETS_AND_QUOTES = re.compile(r'[()\[\]{}"]')
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_SENTENCE_END = re.compile(r"\.\w*")


def _is_kept(char):
    # punctuation is any Unicode punctuation plus the ASCII symbols, other symbols are dropped
    return (char.isalnum() or char.isspace() or char in string.punctuation
            or unicodedata.category(char).startswith("P"))


def tokenize(sentence):
    # drops () [] {} and ", then any character that is not a letter, digit, space or punctuation
    sentence = _BRACKETS_AND_QUOTES.sub("", sentence)
    sentence = "".join(char for char in sentence if _is_kept(char))
    return sentence.split()


def split_sentences(text):
    sentences = []
    for paragraph in _PARAGRAPH_BREAK.split(text):
        for sentence in _SENTENCE_END.split(paragraph):
            sentence = sentence.strip()
            if sentence:
                sentences.append(sentence)
    return sentences
