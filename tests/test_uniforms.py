"""Tests for uniforms.py — the GL call is monkeypatched, no context needed."""

import ctypes

import pytest

import uniforms
from matrix import Matrix4


@pytest.fixture
def gl_calls(monkeypatch):
    calls = []

    def fake_uniform_matrix(location, count, transpose, data):
        calls.append((location, count, transpose, list(data)))

    monkeypatch.setattr(uniforms, "glUniformMatrix4fv", fake_uniform_matrix)
    return calls


class TestUniformData:
    def test_sixteen_floats(self):
        data = uniforms.uniform_data(Matrix4.identity())
        assert len(data) == 16
        assert isinstance(data, ctypes.Array)
        assert data._type_ is ctypes.c_float

    def test_row_order(self):
        m = Matrix4.translation(5.0, 7.0, 0.0)
        assert list(uniforms.uniform_data(m)) == [
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            5.0, 7.0, 0.0, 1.0,
        ]

    def test_transposed_order(self):
        m = Matrix4.translation(5.0, 7.0, 0.0)
        assert list(uniforms.uniform_data(m, transposed=True)) == [
            1.0, 0.0, 0.0, 5.0,
            0.0, 1.0, 0.0, 7.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ]

    def test_single_precision(self):
        m = Matrix4.orthographic(0.0, 960.0, 540.0, 0.0, 0.0, -1.0)
        data = uniforms.uniform_data(m)
        assert data[0] == pytest.approx(2 / 960, rel=1e-6)
        assert data[5] == pytest.approx(-2 / 540, rel=1e-6)


class TestUploadMatrix:
    def test_single_call(self, gl_calls):
        m = Matrix4.scale(2.0, 3.0, 1.0)
        uniforms.upload_matrix(4, m)
        assert len(gl_calls) == 1
        location, count, transpose, data = gl_calls[0]
        assert (location, count) == (4, 1)
        assert transpose == uniforms.GL_FALSE
        assert data == list(uniforms.uniform_data(m))

    def test_transposed_upload(self, gl_calls):
        m = Matrix4.translation(5.0, 7.0, 0.0)
        uniforms.upload_matrix(0, m, transposed=True)
        data = gl_calls[0][3]
        assert data[3] == 5.0
        assert data[7] == 7.0
        assert data[12] == 0.0
