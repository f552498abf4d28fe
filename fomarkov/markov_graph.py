"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
from io import StringIO

from fomarkov.fixed_order_markov import NONWORD, InvalidTarget

TERMINAL_NODE_ID = 1


def _dot_label(text):
    return text.replace("\\", "\\\\").replace('"', '\\"')


def save_graph(markov, stream):
    """Describes the chains of markov as a Graphviz DOT digraph written to stream.

    Each context is a node, and each transition an edge to the context obtained by
    shifting the next word in, or to the terminal node for NONWORD.
    """
    stream.write("digraph markov {\n")
    stream.write("\tordering = out;\n")
    stream.write(f'\tnode_{TERMINAL_NODE_ID} [label="{_dot_label(NONWORD)}"];\n')
    node_ids = {}
    for node_id, (context, _) in enumerate(markov.for_each_context(), start=TERMINAL_NODE_ID + 1):
        node_ids[context] = node_id
        stream.write(f'\tnode_{node_id} [label="{_dot_label("::".join(context))}"];\n')
    for context, next_words in markov.for_each_context():
        for word in next_words:
            if word == NONWORD:
                target_id = TERMINAL_NODE_ID
            else:
                target = context[1:] + (word,)
                if target not in node_ids:
                    raise InvalidTarget(f"the next context [{','.join(target)}] is not a known node")
                target_id = node_ids[target]
            stream.write(f"\tnode_{node_ids[context]} -> node_{target_id};\n")
    stream.write("}\n")


def to_dot(markov):
    buffer = StringIO()
    save_graph(markov, buffer)
    return buffer.getvalue()
