"""
Ordered Tree Demo -- Two-children deletion walk-through, BST vs AVL timing
sweep over sorted and shuffled insertion orders, and tree height analysis.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from ordered_tree import OrderedTree
from balanced_tree import BalancedTree
from records import Pokemon
from benchmark import run_benchmark, format_report

SEED = 42
SIZES = [100, 250, 500, 1000, 1500, 2000]

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

TYPES = ["Grass", "Fire", "Water", "Bug", "Normal", "Poison", "Electric", "Ground"]


def synthetic_records(n, rng):
    """Build n records with distinct, randomly ordered names."""
    ids = rng.permutation(n) + 1
    records = []
    for i in ids:
        stats = rng.integers(20, 160, size=6)
        records.append(Pokemon(
            id=int(i), name=f"Mon{int(i):05d}",
            type1=TYPES[int(i) % len(TYPES)], type2="",
            total=int(stats.sum()), hp=int(stats[0]), attack=int(stats[1]),
            defense=int(stats[2]), special_attack=int(stats[3]),
            special_defense=int(stats[4]), speed=int(stats[5]),
            generation=int(i) % 7 + 1, is_legendary=False,
        ))
    return records


def _draw_tree(ax, tree, title):
    positions = {}
    for x, node in enumerate(_in_order_nodes(tree.root)):
        positions[id(node)] = (x, 0)

    def place(node, depth):
        if node is None:
            return
        x, _ = positions[id(node)]
        positions[id(node)] = (x, -depth)
        for child in (node.left, node.right):
            if child is not None:
                place(child, depth + 1)

    place(tree.root, 0)

    def edges(node):
        if node is None:
            return
        for child in (node.left, node.right):
            if child is not None:
                (x0, y0), (x1, y1) = positions[id(node)], positions[id(child)]
                ax.plot([x0, x1], [y0, y1], "-", color=COLORS["dark"], linewidth=1.5, zorder=1)
                edges(child)

    edges(tree.root)
    for node in _in_order_nodes(tree.root):
        x, y = positions[id(node)]
        color = COLORS["green"] if node.is_leaf() else COLORS["blue"]
        ax.scatter([x], [y], s=700, color=color, zorder=2, edgecolor="white")
        ax.text(x, y, str(node.element), ha="center", va="center",
                fontsize=11, fontweight="bold", color="white", zorder=3)
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.axis("off")


def _in_order_nodes(node):
    stack = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


# ---------------------------------------------------------------------------
# Example 1: Two-Children Deletion
# ---------------------------------------------------------------------------
def example_1_two_children_deletion():
    """Remove a root with two children and show the in-order successor promotion."""
    print("=" * 60)
    print("Example 1: Two-Children Deletion")
    print("=" * 60)

    values = [5, 3, 8, 1, 4, 7, 9]
    tree = OrderedTree()
    for v in values:
        tree.insert(v)

    before = list(tree)
    print(f"\n  Inserted: {values}")
    print(f"  In-order: {before}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    _draw_tree(axes[0], tree, "Before remove(5)\nRoot has two children")

    tree.remove(5)
    after = list(tree)
    print(f"  remove(5) -> root element is now {tree.root.element}")
    print(f"  In-order: {after}")
    print(f"  size() still reports {tree.size()} (insert-call count)")

    assert tree.root.element == 7
    assert after == [1, 3, 4, 7, 8, 9]

    _draw_tree(axes[1], tree, "After remove(5)\nMin of right subtree (7) promoted")

    fig.suptitle("OrderedTree: In-Order Successor Promotion", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_two_children_deletion.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_two_children_deletion.png")


# ---------------------------------------------------------------------------
# Example 2: Timing Sweep
# ---------------------------------------------------------------------------
def example_2_timing_sweep():
    """Insertion and search time of both trees over growing record sets."""
    print("\n" + "=" * 60)
    print("Example 2: BST vs AVL Timing Sweep")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    results = []
    for n in SIZES:
        result = run_benchmark(synthetic_records(n, rng), seed=SEED)
        results.append(result)
        print()
        print(format_report(result))

    labels = [
        ("bst_sorted", "BST sorted", COLORS["red"], "o-"),
        ("bst_random", "BST shuffled", COLORS["orange"], "s-"),
        ("avl_sorted", "AVL sorted", COLORS["blue"], "^-"),
        ("avl_random", "AVL shuffled", COLORS["green"], "d-"),
    ]

    fig, axes = plt.subplots(1, 2, figsize=(16, 6))
    for key, label, color, style in labels:
        inserts = np.array([getattr(r, f"{key}_insert") for r in results]) * 1e3
        searches = np.array([getattr(r, f"{key}_search") for r in results]) * 1e3
        axes[0].plot(SIZES, inserts, style, color=color, linewidth=2, markersize=6, label=label)
        axes[1].plot(SIZES, searches, style, color=color, linewidth=2, markersize=6, label=label)

    axes[0].set_title("Insertion Time\nSorted input degenerates the BST",
                      fontsize=10, fontweight="bold")
    axes[1].set_title("Search Time (all records)\nChain search is O(n) per lookup",
                      fontsize=10, fontweight="bold")
    for ax in axes:
        ax.set_xlabel("Records")
        ax.set_ylabel("Time (ms)")
        ax.legend(fontsize=9)
        ax.grid(True, alpha=0.3)

    fig.suptitle("BST vs AVL: Sorted vs Shuffled Insertion", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_timing_sweep.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_timing_sweep.png")
    return results


# ---------------------------------------------------------------------------
# Example 3: Tree Heights
# ---------------------------------------------------------------------------
def example_3_heights(results):
    """Height of each tree compared with the log2(n) lower bound."""
    print("\n" + "=" * 60)
    print("Example 3: Tree Heights")
    print("=" * 60)

    print(f"\n  {'n':>6} {'BST sorted':>12} {'BST shuffled':>14} {'AVL sorted':>12} {'AVL shuffled':>14}")
    print(f"  {'-' * 62}")
    for r in results:
        print(f"  {r.n:>6} {r.bst_sorted_height:>12} {r.bst_random_height:>14} "
              f"{r.avl_sorted_height:>12} {r.avl_random_height:>14}")

    n = np.array(SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(16, 6))
    axes[0].plot(n, [r.bst_sorted_height for r in results], "o-", color=COLORS["red"],
                 linewidth=2, label="BST sorted")
    axes[0].plot(n, n, "--", color=COLORS["dark"], alpha=0.5, label="h = n")
    axes[0].set_title("Degenerate BST\nSorted insertion builds a chain",
                      fontsize=10, fontweight="bold")

    axes[1].plot(n, [r.bst_random_height for r in results], "s-", color=COLORS["orange"],
                 linewidth=2, label="BST shuffled")
    axes[1].plot(n, [r.avl_sorted_height for r in results], "^-", color=COLORS["blue"],
                 linewidth=2, label="AVL sorted")
    axes[1].plot(n, [r.avl_random_height for r in results], "d-", color=COLORS["green"],
                 linewidth=2, label="AVL shuffled")
    axes[1].plot(n, np.ceil(np.log2(n + 1)), "--", color=COLORS["dark"], alpha=0.5,
                 label="log2(n+1)")
    axes[1].set_title("Logarithmic Heights\nAVL stays within 1.44 log2(n)",
                      fontsize=10, fontweight="bold")

    for ax in axes:
        ax.set_xlabel("Records")
        ax.set_ylabel("Height (levels)")
        ax.legend(fontsize=9)
        ax.grid(True, alpha=0.3)

    fig.suptitle("Tree Height by Insertion Order", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_tree_heights.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_tree_heights.png")


def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    titles = {
        "01_two_children_deletion.png": "Example 1: Two-Children Deletion",
        "02_timing_sweep.png": "Example 2: BST vs AVL Timing Sweep",
        "03_tree_heights.png": "Example 3: Tree Heights",
    }

    with PdfPages(str(report_path)) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Ordered Tree vs AVL Tree", fontsize=26, ha="center",
                 fontweight="bold")
        fig.text(0.5, 0.5, f"Record counts: {SIZES}\nSeed: {SEED}", fontsize=12,
                 ha="center", family="monospace")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Ordered Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Sizes: {SIZES}")
    print()

    example_1_two_children_deletion()
    results = example_2_timing_sweep()
    example_3_heights(results)
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
