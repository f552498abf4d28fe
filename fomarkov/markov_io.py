"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
from pathlib import Path

from fomarkov.fixed_order_markov import Fixed_order_Markov, MarkovError

# Flat chains format: the first line is the order, then one line per observed
# transition, the context words followed by the next word, separated by tabs.
# A transition observed k times is written k times.


class MalformedRecord(MarkovError, ValueError):
    def __init__(self, line_number, line, reason):
        self.line_number = line_number
        self.line = line
        super().__init__(f"line {line_number}: {reason}: {line!r}")


_SEPARATORS = ("\t", "\r", "\n")


def check_chains(markov):
    # a word holding a separator could not be read back
    line_number = 1
    for context, next_words in markov.for_each_context():
        for word in next_words:
            line_number += 1
            for field in context + (word,):
                if any(separator in field for separator in _SEPARATORS):
                    raise MalformedRecord(
                        line_number, "\t".join(context + (word,)), "a word contains a tab or a line break"
                    )


def write_chains(markov, stream):
    check_chains(markov)
    stream.write(f"{markov.order}\n")
    for context, next_words in markov.for_each_context():
        prefix = "\t".join(context)
        for word in next_words:
            stream.write(f"{prefix}\t{word}\n")


def save_chains(markov, filename: Path | str):
    check_chains(markov)
    with open(filename, "w", encoding="utf-8") as file:
        write_chains(markov, file)


def read_chains(stream, rng=None, seed=None):
    header = stream.readline()
    try:
        order = int(header.strip())
    except ValueError:
        raise MalformedRecord(1, header, "expected the chain order") from None
    if order < 1:
        raise MalformedRecord(1, header, "the chain order should be positive")
    markov = Fixed_order_Markov(order, rng=rng, seed=seed)
    for line_number, line in enumerate(stream, start=2):
        line = line.rstrip("\r\n")
        fields = line.split("\t")
        if len(fields) != order + 1:
            raise MalformedRecord(
                line_number, line, f"expected {order + 1} tab separated fields, found {len(fields)}"
            )
        markov.observe(fields[:order], fields[order])
    return markov


def load_chains(filename: Path | str, rng=None, seed=None):
    with open(filename, "r", encoding="utf-8") as file:
        return read_chains(file, rng=rng, seed=seed)
