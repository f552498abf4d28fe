"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import math
import random
from collections import Counter

import numpy as np

NONWORD = "####"


class MarkovError(Exception):
    pass


class UnknownContext(MarkovError, KeyError):
    def __init__(self, context, reason="is not a known context"):
        self.context = tuple(context)
        super().__init__(f"context [{','.join(str(word) for word in self.context)}] {reason}")

    def __str__(self):
        # KeyError would repr() the message
        return self.args[0]


class EmptyModel(MarkovError):
    pass


class InvalidTarget(MarkovError):
    pass


class GenerationLimitExceeded(MarkovError):
    def __init__(self, max_length, partial_output):
        self.max_length = max_length
        self.partial_output = partial_output
        super().__init__(f"generation did not terminate within {max_length} tokens")


class Fixed_order_Markov:
    """A fixed order Markov chain over words.

    Contexts are tuples of exactly `order` words. Each context maps to the list of
    words observed after it, duplicates included, so that drawing uniformly from
    the list follows the learned frequencies. NONWORD pads the start of every
    learned sequence and terminates it.
    """

    def __init__(self, order, rng=None, seed=None):
        if order < 1:
            raise ValueError(f"order should be a positive integer, got {order}")
        self.order = order
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng
        self.chains = {}

    # ---- chain store

    def observe(self, context, next_word):
        context = tuple(context)
        if context not in self.chains:
            self.chains[context] = []
        self.chains[context].append(next_word)

    def transitions(self, context):
        context = tuple(context)
        if len(context) != self.order:
            raise UnknownContext(
                context, f"has length {len(context)}, but should be {self.order}"
            )
        if context not in self.chains:
            raise UnknownContext(context)
        return self.chains[context]

    def for_each_context(self):
        return iter(self.chains.items())

    def get_chains(self):
        return self.chains

    def nb_contexts(self):
        return len(self.chains)

    def nb_transitions(self):
        return sum(len(next_words) for next_words in self.chains.values())

    def get_vocabulary(self):
        vocabulary = set()
        for context, next_words in self.chains.items():
            vocabulary.update(context)
            vocabulary.update(next_words)
        vocabulary.discard(NONWORD)
        return vocabulary

    def voc_size(self):
        # NONWORD is not counted
        return len(self.get_vocabulary())

    # ---- learning

    def learn(self, words):
        # sequences too short to fill a single context teach nothing
        if len(words) <= self.order:
            return
        if NONWORD in words:
            raise ValueError(f"{NONWORD!r} is reserved to pad and terminate sequences, it cannot be learned as a word")
        padded = [NONWORD] * self.order + list(words) + [NONWORD]
        for i in range(self.order, len(padded)):
            self.observe(padded[i - self.order: i], padded[i])

    def learn_sequences(self, sequences):
        for words in sequences:
            self.learn(words)

    # ---- generation

    def step(self, state):
        """Shifts the next generated word out of state.

        When state holds a full context, a continuation is drawn and appended to it,
        unless the continuation is NONWORD, in which case state only drains.
        """
        if len(state) == self.order:
            next_words = self.transitions(state)
            next_word = next_words[self.rng.randrange(len(next_words))]
            if next_word != NONWORD:
                state.append(next_word)
        return state.pop(0)

    def prime_start(self):
        state = [NONWORD] * self.order
        # shifts the start padding out of the state
        for _ in range(self.order):
            self.step(state)
        return state

    def generate(self, max_length=None):
        state = self.prime_start()
        output = []
        while len(state) > 0:
            if max_length is not None and len(output) >= max_length:
                raise GenerationLimitExceeded(max_length, output)
            output.append(self.step(state))
        return output

    # ---- entropy

    @staticmethod
    def distribution_entropy(values):
        """Shannon entropy, in bits, of the empirical distribution of values."""
        if len(values) == 0:
            return 0.0
        counts = np.array(list(Counter(values).values()))
        if np.all(counts == counts[0]):
            # U equally frequent values carry exactly log2(U) bits
            return math.log2(len(counts))
        total = counts.sum()
        return float(np.sum(counts / total * np.log2(total / counts)))

    def context_entropy(self, context):
        return self.distribution_entropy(self.transitions(context))

    def sequence_entropies(self, words):
        # entropy of the choice made at each position, not of the word actually picked
        state = [NONWORD] * self.order
        entropies = []
        for word in words:
            entropies.append(self.context_entropy(state))
            state.append(word)
            state.pop(0)
        return entropies

    def sequence_entropy(self, words):
        return sum(self.sequence_entropies(words))

    def average_entropy_per_term(self):
        if len(self.chains) == 0:
            raise EmptyModel("cannot average entropy over a model with no contexts")
        entropies = [self.distribution_entropy(next_words) for _, next_words in self.for_each_context()]
        return float(np.mean(entropies))

    def show_chain_structure(self):
        print(f"order: {self.order}")
        print(f"number of contexts: {self.nb_contexts()}")
        print(f"number of transitions: {self.nb_transitions()}")
        print(f"voc size: {self.voc_size()}")
        if len(self.chains) == 0:
            return
        conts_sizes = [len(set(next_words)) for next_words in self.chains.values()]
        print(f"min continuations: {min(conts_sizes)}, max: {max(conts_sizes)}")
