import logging

logger = logging.getLogger(__name__)


def build_topo(root):
    """
    Order every node reachable from `root` so that each node comes after all of
    its children. Iterative, so graph depth is not bounded by the recursion limit.
    """
    topo = []
    visited = set()
    stack = [(root, False)]

    while stack:
        node, expanded = stack.pop()
        if expanded:
            topo.append(node)
            continue
        if node in visited:
            continue
        visited.add(node)
        stack.append((node, True))
        for child in node._prev:
            if child not in visited:
                stack.append((child, False))
    return topo


def backward(root):
    topo = build_topo(root)
    logger.debug("backward from %r over %d nodes", root, len(topo))

    root.grad = 1.0
    # gradient delivered to each node during this pass only, so repeated calls
    # add exactly one pass worth of gradient instead of compounding
    delivered = {root: 1.0}
    for node in reversed(topo):
        node._backward(delivered.pop(node, 0.0), delivered)


def zero_grad(root):
    for node in build_topo(root):
        node.grad = 0.0
