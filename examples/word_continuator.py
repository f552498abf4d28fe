"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import re
import sys

from fomarkov.fixed_order_markov import NONWORD, Fixed_order_Markov
from fomarkov.tokenizer import split_sentences, tokenize

if __name__ == '__main__':
    if len(sys.argv) != 2:
        print(f"usage: {sys.argv[0]} <text file>", file=sys.stderr)
        sys.exit(2)
    with open(sys.argv[1], 'r', encoding='utf-8') as file:
        text = file.read().rstrip()
    markov = Fixed_order_Markov(2)
    markov.learn_sequences([word for word in tokenize(sentence) if word != NONWORD]
                          for sentence in split_sentences(text))
    markov.show_chain_structure()
    for i in range(5):
        seq = markov.generate(max_length=200)
        result = ' '.join(seq)
        # Removes spaces before punctuation
        result = re.sub(r"\s([?.!,:;])", r"\1", result)
        print(f"{result} ({markov.sequence_entropy(seq):.1f} bits)")
