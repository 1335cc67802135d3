import numpy as np

# Forward kernels take and return plain floats. Local derivative rules take the
# output node and return one (operand, d(out)/d(operand)) pair per edge.

def add(a, b):
    return a + b

def mul(a, b):
    return a * b

def power(a, exponent):
    # float64 semantics: 0.0 ** -1 -> inf, (-8.0) ** 0.5 -> nan, overflow -> inf
    with np.errstate(all='ignore'):
        return float(np.power(np.float64(a), exponent))

def relu(a):
    return a if a > 0 else 0.0

def add_backward(out):
    a, b = out._operands
    return ((a, 1.0), (b, 1.0))

def mul_backward(out):
    a, b = out._operands
    return ((a, b.data), (b, a.data))

def power_backward(out):
    a, = out._operands
    n = out._exponent
    return ((a, n * power(a.data, n - 1)),)

def relu_backwards(out):
    a, = out._operands
    return ((a, 1.0 if a.data > 0 else 0.0),)

BACKWARD = {
    '+': add_backward,
    '*': mul_backward,
    '**': power_backward,
    'ReLU': relu_backwards,
}

def local_grads(out):
    rule = BACKWARD.get(out._op)
    if rule is None or not out._operands:
        return ()
    return rule(out)
