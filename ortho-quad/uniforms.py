"""
Hand a Matrix4 to OpenGL as a mat4 uniform.

The shader side only ever sees 16 floats; which export of the matrix
fills them (row order or transposed) is the caller's choice.
"""

import ctypes

from OpenGL.GL import GL_FALSE, glUniformMatrix4fv


def uniform_data(matrix, transposed=False):
    """Flatten a matrix into a ctypes float[16] buffer, one row after another."""
    rows = matrix.to_array_transposed() if transposed else matrix.to_array()
    return (ctypes.c_float * 16)(*(value for row in rows for value in row))


def upload_matrix(location, matrix, transposed=False):
    """Set the mat4 uniform at ``location`` on the bound shader program."""
    glUniformMatrix4fv(location, 1, GL_FALSE, uniform_data(matrix, transposed))
