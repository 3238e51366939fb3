"""
4x4 matrix type for the 2D quad renderer.

Fields are named m{row}{col}.  Translation lives in row 4, so matrices
post-multiply row vectors (v' = v * M).  to_array() hands the matrix to
the shader side row by row; to_array_transposed() swaps rows and columns
for uniforms that expect the other layout.

Element values can be any number supporting + and *; the factory
functions build floats.  No external dependencies beyond the stdlib.
"""

import math


FIELDS = tuple(f"m{row}{col}" for row in range(1, 5) for col in range(1, 5))


def _field(row, col):
    """Field name for zero-based (row, col)."""
    return FIELDS[row * 4 + col]


class Matrix4:
    """Homogeneous 4x4 matrix.  Matrix4() is all zero, not identity."""

    __slots__ = FIELDS

    def __init__(self, **fields):
        for name in FIELDS:
            setattr(self, name, fields.pop(name, 0))
        if fields:
            raise TypeError(f"unknown matrix fields: {', '.join(sorted(fields))}")

    @classmethod
    def _float_fields(cls, **fields):
        """Matrix with every field a float; unset fields are 0.0."""
        values = dict.fromkeys(FIELDS, 0.0)
        values.update((name, float(value)) for name, value in fields.items())
        return cls(**values)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls):
        return cls._float_fields(m11=1.0, m22=1.0, m33=1.0, m44=1.0)

    @classmethod
    def translation(cls, x, y, z):
        return cls._float_fields(
            m11=1.0, m22=1.0, m33=1.0,
            m41=x,   m42=y,   m43=z,   m44=1.0,
        )

    @classmethod
    def scale(cls, x, y, z):
        return cls._float_fields(m11=x, m22=y, m33=z, m44=1.0)

    @classmethod
    def rotation_2d(cls, angle):
        """Rotation about the z axis, angle in radians.

        m12 = sin and m21 = -sin; callers relying on a direction of
        rotation must derive it from this layout.
        """
        c = math.cos(angle)
        s = math.sin(angle)
        return cls._float_fields(
            m11=c,  m12=s,
            m21=-s, m22=c,
            m33=1.0,
            m44=1.0,
        )

    @classmethod
    def orthographic(cls, left, right, bottom, top, near, far):
        """Map the box [left,right] x [bottom,top] x [near,far] to clip space.

        The box must not be degenerate: right == left, top == bottom or
        near == far divide by zero, which for floats raises
        ZeroDivisionError.
        """
        return cls._float_fields(
            m11=2.0 / (right - left),
            m22=2.0 / (top - bottom),
            m33=1.0 / (near - far),
            m41=(left + right) / (left - right),
            m42=(top + bottom) / (bottom - top),
            m43=near / (near - far),
            m44=1.0,
        )

    @classmethod
    def from_array(cls, array):
        """Build a matrix from a 4x4 nested sequence indexed [row][col]."""
        rows = list(array)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            shape = [len(row) for row in rows]
            raise ValueError(f"expected a 4x4 array, got rows of lengths {shape}")
        m = cls()
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                setattr(m, _field(r, c), value)
        return m

    def copy(self):
        m = type(self)()
        for name in FIELDS:
            setattr(m, name, getattr(self, name))
        return m

    __copy__ = copy

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_array(self):
        """Return [[m11, m12, m13, m14], ..., [m41, m42, m43, m44]]."""
        return [
            [getattr(self, _field(r, c)) for c in range(4)]
            for r in range(4)
        ]

    def to_array_transposed(self):
        """Return [[m11, m21, m31, m41], ..., [m14, m24, m34, m44]]."""
        return [
            [getattr(self, _field(r, c)) for r in range(4)]
            for c in range(4)
        ]

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        m = type(self)()
        for name in FIELDS:
            setattr(m, name, getattr(self, name) + getattr(other, name))
        return m

    def __matmul__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        a = self.to_array()
        b = other.to_array()
        m = type(self)()
        for r in range(4):
            for c in range(4):
                # term by term so integer and Fraction elements stay exact
                s = (a[r][0] * b[0][c] + a[r][1] * b[1][c]
                     + a[r][2] * b[2][c] + a[r][3] * b[3][c])
                setattr(m, _field(r, c), s)
        return m

    def __imatmul__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        product = self @ other
        for name in FIELDS:
            setattr(self, name, getattr(product, name))
        return self

    def apply(self, v):
        """Multiply the row vector v = (x, y, z, w) on the left: v * M."""
        x, y, z, w = v
        return tuple(
            x * getattr(self, _field(0, c)) + y * getattr(self, _field(1, c))
            + z * getattr(self, _field(2, c)) + w * getattr(self, _field(3, c))
            for c in range(4)
        )

    # ------------------------------------------------------------------
    # Value protocol
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in FIELDS)

    # mutable through @=
    __hash__ = None

    def __repr__(self):
        rows = ", ".join(
            "[" + ", ".join(repr(v) for v in row) + "]"
            for row in self.to_array()
        )
        return f"{type(self).__name__}([{rows}])"


def identity():
    """Return the 4x4 identity matrix."""
    return Matrix4.identity()


def add(a, b):
    return a + b


def multiply(a, b):
    """Return the product a * b as a new matrix."""
    return a @ b


def multiply_assign(a, b):
    """Replace a with a * b in place and return a."""
    a @= b
    return a
