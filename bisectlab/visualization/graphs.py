"""Graph visualization helpers."""

from __future__ import annotations


def draw_partition(
    A,
    coords,
    labels,
    file_name=None,
    show=False,
    node_size=None,
    edge_alpha=0.4,
    title=None,
    figsize=(8, 8),
):
    """Draw a graph at its vertex coordinates with nodes coloured by part.

    Edges crossing between parts are drawn in black, edges inside a part in
    light grey. Only the first two coordinate columns are used; 1D
    coordinates are laid out on a line.

    Returns:
        The matplotlib ``Figure``.
    """
    import matplotlib.pyplot as plt
    import networkx as nx
    import numpy as np

    from bisectlab.utils.graph import as_adjacency, as_coordinates

    A = as_adjacency(A)
    n = A.shape[0]
    coords = as_coordinates(coords, n)
    if coords.shape[1] == 1:
        coords = np.column_stack([coords[:, 0], np.zeros(n)])
    labels = np.asarray(labels)
    k = int(labels.max()) + 1 if n else 1

    G = nx.from_scipy_sparse_array(A)
    pos = {i: coords[i, :2] for i in range(n)}

    if k <= 2:
        colors = ["#ffcb05", "#00274c"]
    elif k <= 10:
        cmap = plt.get_cmap("tab10")
        colors = cmap(np.linspace(0, 1, cmap.N))
    else:
        colors = []
        for cmap_name in ["tab20", "tab20b", "tab20c"]:
            cmap = plt.get_cmap(cmap_name)
            colors.extend(cmap(np.linspace(0, 1, cmap.N)))
    node_colors = [colors[label % len(colors)] for label in labels]

    cut_edges = [(u, v) for u, v in G.edges() if labels[u] != labels[v]]
    inner_edges = [(u, v) for u, v in G.edges() if labels[u] == labels[v]]

    fig = plt.figure(figsize=figsize)
    nx.draw_networkx_edges(G, pos, edgelist=inner_edges, edge_color="#bfbfbf", alpha=edge_alpha)
    nx.draw_networkx_edges(G, pos, edgelist=cut_edges, edge_color="#000000", width=1.5)
    nx.draw_networkx_nodes(
        G,
        pos,
        node_color=node_colors,
        node_size=node_size if node_size is not None else max(5, round(3000 / max(n, 1))),
    )
    if title:
        plt.title(title)
    plt.axis("equal")
    plt.axis("off")
    if file_name:
        plt.savefig(file_name, bbox_inches="tight", dpi=150)
    if show:
        plt.show()
    plt.close(fig)
    return fig
