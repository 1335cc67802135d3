import logging

from valuegrad.engine import build_topo

logger = logging.getLogger(__name__)


class SGD():
    def __init__(self, params, lr=0.01):
        self.params = list(params)
        self.lr = lr

    @classmethod
    def from_graph(cls, start, lr=0.01):
        """Optimize the unlabelled leaves reachable from `start`."""
        leafs = [v for v in build_topo(start) if not v._prev and not v._op]
        return cls(leafs, lr=lr)

    def step(self):
        for v in self.params:
            v.data -= self.lr * v.grad
        logger.debug("sgd step over %d params, lr=%s", len(self.params), self.lr)

    def zero_grad(self):
        for v in self.params:
            v.grad = 0.0
