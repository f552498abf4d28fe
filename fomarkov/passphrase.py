"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import argparse
import pathlib
import sys

from fomarkov.fixed_order_markov import NONWORD, Fixed_order_Markov, MarkovError
from fomarkov.markov_graph import save_graph
from fomarkov.markov_io import load_chains, save_chains
from fomarkov.tokenizer import split_sentences, tokenize

DEFAULT_ORDER = 2
DEFAULT_MIN_ENTROPY = 128
DEFAULT_MAX_LENGTH = 1000
DEFAULT_ATTEMPTS = 10


def corpus_files(path_string):
    path = pathlib.Path(path_string)
    return sorted(path.glob("*.txt"))


def learn_corpus_file(markov, path):
    print(f"Learning from corpus file '{path}'")
    with open(path, "r", encoding="utf-8") as file:
        text = file.read()
    for sentence in split_sentences(text):
        # the sentinel cannot be learned, a corpus word spelled like it is dropped
        markov.learn([word for word in tokenize(sentence) if word != NONWORD])


def learn_corpus(markov, path_string):
    files = corpus_files(path_string)
    for path in files:
        learn_corpus_file(markov, path)
    return files


def describe_sentence(markov, words):
    entropies = markov.sequence_entropies(words)
    lines = [f"Generated {len(words)} tokens for sentence"]
    for word, entropy in zip(words, entropies):
        lines.append(f"\t{word} ({entropy} bits)")
    lines.append(f" - Total entropy: {sum(entropies)} bits")
    return "\n".join(lines)


def generate_passphrase(markov, min_entropy=DEFAULT_MIN_ENTROPY, max_length=DEFAULT_MAX_LENGTH):
    """Generates sentences until their summed entropy reaches min_entropy bits.

    Returns the list of generated sentences and their total entropy, which is a
    lower bound on the number of bits an attacker knowing the model has to guess.
    """
    if markov.average_entropy_per_term() == 0:
        raise ValueError("the model never branches, no passphrase can carry any entropy")
    sentences = []
    total_entropy = 0.0
    while total_entropy < min_entropy:
        sentence = markov.generate(max_length=max_length)
        sentences.append(sentence)
        total_entropy += markov.sequence_entropy(sentence)
    return sentences, total_entropy


def build_parser():
    parser = argparse.ArgumentParser(
        description="Learns word chains from a corpus of .txt files and generates sentences and passphrases."
    )
    parser.add_argument("corpus", nargs="?", default=None,
                        help="directory holding the .txt corpus files (not needed with --load)")
    parser.add_argument("--order", type=int, default=DEFAULT_ORDER)
    parser.add_argument("--chains", default=None, help="chains output file (default: <corpus>/chains.markov)")
    parser.add_argument("--load", default=None, help="loads chains from this file instead of learning the corpus")
    parser.add_argument("--graph", default=None, help="writes the chains as a Graphviz DOT file")
    parser.add_argument("--attempts", type=int, default=DEFAULT_ATTEMPTS)
    parser.add_argument("--min-entropy", type=float, default=DEFAULT_MIN_ENTROPY)
    parser.add_argument("--max-length", type=int, default=DEFAULT_MAX_LENGTH)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def run(args):
    if args.load is not None:
        print(f"Loading chains from '{args.load}'")
        markov = load_chains(args.load, seed=args.seed)
    else:
        markov = Fixed_order_Markov(args.order, seed=args.seed)
        learn_corpus(markov, args.corpus)
        chains_file = args.chains or str(pathlib.Path(args.corpus) / "chains.markov")
        print("Saving chains to file")
        save_chains(markov, chains_file)

    if args.graph is not None:
        print("Saving graph to file")
        with open(args.graph, "w", encoding="utf-8") as file:
            save_graph(markov, file)

    print(f"Average entropy per term is {markov.average_entropy_per_term()}")

    for _ in range(args.attempts):
        sentence = markov.generate(max_length=args.max_length)
        print(describe_sentence(markov, sentence))
        print()

    sentences, total_entropy = generate_passphrase(
        markov, min_entropy=args.min_entropy, max_length=args.max_length
    )
    print(f"Passphrase of {len(sentences)} sentences, at least {total_entropy} bits:")
    for sentence in sentences:
        print("\t" + " ".join(sentence))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.load is None and args.corpus is None:
        parser.error("a corpus directory is required unless --load is given")
    try:
        run(args)
    except (MarkovError, ValueError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
