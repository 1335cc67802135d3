from numbers import Real

import valuegrad.engine as engine
import valuegrad.ops.mlops as ops


def _as_float(x, name):
    if not isinstance(x, Real):
        raise TypeError(f"The {name} attribute must be a float or an int, got {type(x).__name__}")
    return float(x)


class Value():
    """
    A scalar, its gradient and the record of the operation that produced it.

    Arithmetic on a Value builds a new node holding its operands, so calling
    backward() on a result fills in d(result)/d(node) for every node it was
    derived from.

        a = Value(2.0)
        b = Value(3.0)
        c = a * b + a
        c.backward()
        a.grad  # 4.0
    """

    def __init__(self, data, _children=(), _op=''):
        self.data = data
        self.grad = 0.0
        self._prev = set(_children)
        self._op = _op
        self._operands = ()
        self._exponent = None

    @property
    def data(self):
        return self._data

    @data.setter
    def data(self, data):
        self._data = _as_float(data, 'data')

    @data.deleter
    def data(self):
        raise TypeError("Cannot delete the data attribute")

    @property
    def grad(self):
        return self._grad

    @grad.setter
    def grad(self, grad):
        self._grad = _as_float(grad, 'grad')

    @grad.deleter
    def grad(self):
        raise TypeError("Cannot delete the grad attribute")

    @property
    def children(self):
        return frozenset(self._prev)

    @property
    def op(self):
        return self._op

    def _backward(self, upstream=None, delivered=None):
        """
        Push `upstream` (this node's grad by default) through the local
        derivatives into the operands' grads, once per edge. When `delivered`
        is given, each contribution is also tallied there by operand.
        """
        if upstream is None:
            upstream = self.grad
        for operand, local in ops.local_grads(self):
            contribution = local * upstream
            operand.grad += contribution
            if delivered is not None:
                delivered[operand] = delivered.get(operand, 0.0) + contribution

    def __add__(self, other):
        other = _wrap(other)
        if other is NotImplemented:
            return other
        out = Value(ops.add(self.data, other.data), (self, other), '+')
        out._operands = (self, other)
        return out

    def __mul__(self, other):
        other = _wrap(other)
        if other is NotImplemented:
            return other
        out = Value(ops.mul(self.data, other.data), (self, other), '*')
        out._operands = (self, other)
        return out

    def __pow__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        out = Value(ops.power(self.data, other), (self,), '**')
        out._operands = (self,)
        out._exponent = other
        return out

    def relu(self):
        out = Value(ops.relu(self.data), (self,), 'ReLU')
        out._operands = (self,)
        return out

    def __neg__(self):
        return self * -1

    def __sub__(self, other):
        other = _wrap(other)
        if other is NotImplemented:
            return other
        return self + (-other)

    def __truediv__(self, other):
        other = _wrap(other)
        if other is NotImplemented:
            return other
        return self * other**(-1)

    def __radd__(self, other):
        return self + other

    def __rsub__(self, other):
        other = _wrap(other)
        if other is NotImplemented:
            return other
        return other + (-self)

    def __rmul__(self, other):
        return self * other

    def __rtruediv__(self, other):
        other = _wrap(other)
        if other is NotImplemented:
            return other
        return other * self**(-1)

    def backward(self):
        engine.backward(self)

    def __repr__(self):
        return f"Value(data={self.data}, grad={self.grad})"


def _wrap(x):
    if isinstance(x, Value):
        return x
    if isinstance(x, Real):
        return Value(x)
    return NotImplemented
