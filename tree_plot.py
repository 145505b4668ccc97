from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Circle

from huffman import HuffmanNode, build_code_table


NODE_RADIUS = 0.12

Edge = Tuple[HuffmanNode, HuffmanNode, str]


def layout_tree(root: HuffmanNode) -> Tuple[Dict[int, Tuple[float, int]], List[Edge]]:
    """
    Post-order layout so both children have positions before their parent.
    Leaves take successive x slots, internal nodes sit between their children.
    Positions are keyed by id(node) since nodes compare by frequency.
    """
    positions: Dict[int, Tuple[float, int]] = {}
    edges: List[Edge] = []
    next_leaf_x = 0

    stack = [(root, 0, False)] # (node, depth, children already placed)
    while stack:
        node, depth, expanded = stack.pop()
        children = [(child, bit) for child, bit in ((node.left, "0"), (node.right, "1")) if child is not None]

        if children and not expanded:
            stack.append((node, depth, True))
            for child, _ in reversed(children):
                stack.append((child, depth + 1, False))
            continue

        if not children:
            x = float(next_leaf_x)
            next_leaf_x += 1
        else:
            x = sum(positions[id(child)][0] for child, _ in children) / len(children)
            for child, bit in children:
                edges.append((node, child, bit))
        positions[id(node)] = (x, depth)

    return positions, edges


def _leaves(root: HuffmanNode):
    stack = [root]
    while stack:
        node = stack.pop()
        if node.left is None and node.right is None:
            yield node
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append(child)


def plot_huffman_tree(root: Optional[HuffmanNode], path: Optional[Path] = None,
                      title: str = "Huffman Tree (left=0, right=1)"):
    if root is None:
        raise ValueError("cannot plot an empty Huffman tree")

    positions, edges = layout_tree(root)
    codes = build_code_table(root)

    width = max(4.0, 0.9 * sum(1 for _ in _leaves(root)))
    height = max(3.0, 1.2 * (max(depth for _, depth in positions.values()) + 1))
    fig, ax = plt.subplots(figsize=(width, height))

    for parent, child, bit in edges:
        x1, y1 = positions[id(parent)]
        x2, y2 = positions[id(child)]
        ax.add_line(Line2D([x1, x2], [-y1, -y2], color="darkblue"))
        ax.text((x1 + x2) / 2, (-y1 - y2) / 2 + 0.1, bit, fontsize=9, ha="center", va="bottom", color="darkblue")

    for leaf in _leaves(root):
        x, y = positions[id(leaf)]
        ax.text(x, -y - 0.2, f"{leaf.character!r}\nf={leaf.frequency}\n{codes.get(leaf.character, '')}",
                fontsize=8, ha="center", va="top")

    for x, y in positions.values():
        ax.add_patch(Circle((x, -y), NODE_RADIUS, fill=True, facecolor="navy", edgecolor="black"))

    ax.set_title(title)
    ax.set_aspect("equal")
    ax.axis("off")

    xs = [pos[0] for pos in positions.values()]
    ys = [-pos[1] for pos in positions.values()]
    ax.set_xlim(min(xs) - 0.8, max(xs) + 0.8)
    ax.set_ylim(min(ys) - 1.0, max(ys) + 0.5)
    fig.tight_layout()

    if path is not None:
        fig.savefig(path, dpi=200)
        plt.close(fig)
    return fig
