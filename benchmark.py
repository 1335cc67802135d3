import time
import numpy as np
import torch
from valuegrad.logger import setup_logger
from valuegrad.value import Value

logger = setup_logger("benchmark")

repeat = 20

def chain(x, n):
    # every step reuses x, so x feeds n different downstream nodes
    y = x
    for _ in range(n):
        y = (y * 0.999 + x).relu() - 0.5
    return y

def time_operation(graph_func, op_name, n):
    times = []

    for _ in range(repeat):
        x = Value(0.75)
        start = time.time()
        y = graph_func(x, n)
        y.backward()
        times.append(time.time() - start)

    logger.info(f'({n} steps) time[ms] average of 1 {op_name} forward+backward in {repeat} iterations: {np.average(times) * 1e3}')

    x_torch = torch.tensor(0.75, dtype=torch.double, requires_grad=True)
    y_torch = graph_func(x_torch, n)
    y_torch.backward()
    assert np.allclose(y.data, y_torch.item())
    assert np.allclose(x.grad, x_torch.grad.item())

graph_sizes = [128, 256, 512, 1024, 2048, 4096]

for size in graph_sizes:
    time_operation(chain, 'shared-input chain', size)
