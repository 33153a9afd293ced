"""Signal acquisition helpers: equations, number lists, brush strokes, resampling."""

from __future__ import annotations

import ast
import re
from collections.abc import Sequence

import numpy as np

from fft_explorer.utils.validation import as_1d_array, as_point_count

RESOLUTION_OPTIONS: tuple[int, ...] = (32, 64, 128)
DEFAULT_RESOLUTION = 128
DEFAULT_EQUATION = "sin(2 * pi * 3 * x) + 0.5 * sin(2 * pi * 10 * x)"
DEFAULT_BRUSH_SIZE = 2

_NUMBER_SEPARATOR = re.compile(r"[\s,]+")

_EQUATION_NAMES: dict[str, object] = {
    "abs": np.abs,
    "acos": np.arccos,
    "asin": np.arcsin,
    "atan": np.arctan,
    "atan2": np.arctan2,
    "ceil": np.ceil,
    "cos": np.cos,
    "cosh": np.cosh,
    "exp": np.exp,
    "floor": np.floor,
    "log": np.log,
    "log10": np.log10,
    "log2": np.log2,
    "max": np.maximum,
    "min": np.minimum,
    "pow": np.power,
    "round": np.round,
    "sign": np.sign,
    "sin": np.sin,
    "sinh": np.sinh,
    "sqrt": np.sqrt,
    "tan": np.tan,
    "tanh": np.tanh,
    "pi": np.pi,
    "e": np.e,
    "PI": np.pi,
    "E": np.e,
}

_ALLOWED_EQUATION_NODES = (
    ast.Expression,
    ast.BinOp,
    ast.UnaryOp,
    ast.Call,
    ast.Name,
    ast.Load,
    ast.Constant,
    ast.Add,
    ast.Sub,
    ast.Mult,
    ast.Div,
    ast.FloorDiv,
    ast.Mod,
    ast.Pow,
    ast.USub,
    ast.UAdd,
)


class _FloatConstants(ast.NodeTransformer):
    """Bind numeric literals to ``np.float64`` names so arithmetic follows NumPy rules."""

    def __init__(self, namespace: dict[str, object]) -> None:
        self._namespace = namespace

    def visit_Constant(self, node: ast.Constant) -> ast.Name:
        name = f"_const{len(self._namespace)}"
        self._namespace[name] = np.float64(node.value)
        return ast.copy_location(ast.Name(id=name, ctx=ast.Load()), node)


def unit_positions(n_points: int) -> np.ndarray:
    """Return ``x_i = i / n_points`` for ``i in [0, n_points)``."""

    n = as_point_count(n_points, "n_points")
    if n == 0:
        return np.zeros(0, dtype=float)
    return np.arange(n, dtype=float) / n


def generate_multi_tone(
    frequencies: np.ndarray | Sequence[float],
    n_points: int,
    *,
    amplitudes: np.ndarray | Sequence[float] | None = None,
    phases: np.ndarray | Sequence[float] | None = None,
) -> np.ndarray:
    """Generate a sum of sines with integer-cycle frequencies over one unit window."""

    freqs = as_1d_array(np.asarray(frequencies, dtype=float), "frequencies", dtype=float)
    if amplitudes is None:
        amps = np.ones(freqs.size, dtype=float)
    else:
        amps = as_1d_array(np.asarray(amplitudes, dtype=float), "amplitudes", dtype=float)
        if amps.size != freqs.size:
            raise ValueError("amplitudes must match frequencies length.")
    if phases is None:
        offsets = np.zeros(freqs.size, dtype=float)
    else:
        offsets = as_1d_array(np.asarray(phases, dtype=float), "phases", dtype=float)
        if offsets.size != freqs.size:
            raise ValueError("phases must match frequencies length.")

    x = unit_positions(n_points)
    samples = np.zeros(x.size, dtype=float)
    for frequency, amplitude, phase in zip(freqs, amps, offsets):
        samples += amplitude * np.sin(2.0 * np.pi * frequency * x + phase)
    return samples


def default_signal(n_points: int = DEFAULT_RESOLUTION) -> np.ndarray:
    """Return the start-up waveform: a 3-cycle sine plus a half-amplitude 10-cycle sine."""

    return generate_multi_tone([3.0, 10.0], n_points, amplitudes=[1.0, 0.5])


def evaluate_equation(
    expression: str,
    n_points: int,
    *,
    rng: np.random.Generator | int | None = None,
) -> np.ndarray:
    """Evaluate an expression in ``x`` over :func:`unit_positions`.

    The expression may use arithmetic, the names in the equation namespace
    (``sin``, ``cos``, ``exp``, ``sqrt``, ``pi``, ...) and ``random()``
    for uniform noise in ``[0, 1)``.  A ``Math.`` prefix on names is
    accepted so JavaScript-style input such as ``Math.sin(2 * Math.PI * x)``
    works.  NaN results are replaced by zero.

    Raises
    ------
    ValueError
        If the expression does not parse or uses anything outside the
        allowed names and operators, or if evaluating it fails (for example a
        function called with the wrong number of arguments).  Division by zero
        and overflow follow NumPy and give ``inf``.
    """

    x = unit_positions(n_points)
    source = expression.strip().replace("Math.", "")
    if not source:
        raise ValueError("expression cannot be empty.")
    try:
        tree = ast.parse(source, mode="eval")
    except SyntaxError as exc:
        raise ValueError(f"Invalid equation {expression!r}: {exc.msg}") from exc

    prng = _resolve_rng(rng)
    namespace = dict(_EQUATION_NAMES)
    namespace["x"] = x
    namespace["random"] = lambda: prng.random(x.size)
    for node in ast.walk(tree):
        if not isinstance(node, _ALLOWED_EQUATION_NODES):
            raise ValueError(f"Unsupported syntax in equation: {type(node).__name__}")
        if isinstance(node, ast.Constant) and (
            isinstance(node.value, bool) or not isinstance(node.value, (int, float))
        ):
            raise ValueError(f"Only numeric constants are allowed in equations: {node.value!r}")
        if isinstance(node, ast.Name) and node.id not in namespace:
            raise ValueError(f"Unknown name in equation: {node.id!r}")
        if isinstance(node, ast.Call) and (not isinstance(node.func, ast.Name) or node.keywords):
            raise ValueError("Only plain calls to named functions are allowed in equations.")

    try:
        tree = ast.fix_missing_locations(_FloatConstants(namespace).visit(tree))
        with np.errstate(all="ignore"):
            values = eval(compile(tree, "<equation>", "eval"), {"__builtins__": {}}, namespace)
    except (ArithmeticError, TypeError) as exc:
        raise ValueError(f"Cannot evaluate equation {expression!r}: {exc}") from exc
    samples = np.broadcast_to(np.asarray(values, dtype=float), x.shape).copy()
    samples[np.isnan(samples)] = 0.0
    return samples


def parse_number_list(text: str) -> np.ndarray:
    """Parse comma/whitespace separated numbers, dropping tokens that are not numeric."""

    values: list[float] = []
    for token in _NUMBER_SEPARATOR.split(text.strip()):
        if not token:
            continue
        try:
            value = float(token)
        except ValueError:
            continue
        if not np.isnan(value):
            values.append(value)
    return np.asarray(values, dtype=float)


def stretch_numbers(values: np.ndarray | Sequence[float], n_points: int) -> np.ndarray:
    """Stretch a short number list to ``n_points`` by nearest-lower indexing."""

    source = as_1d_array(values, "values", dtype=float, allow_empty=True)
    n = as_point_count(n_points, "n_points")
    if source.size == 0 or n == 0:
        return np.zeros(n, dtype=float)
    index = np.floor(np.arange(n, dtype=float) / n * source.size).astype(int)
    return source[index]


def resample_linear(samples: np.ndarray | Sequence[float], n_points: int) -> np.ndarray:
    """Linearly resample a signal so its first and last samples stay put.

    Output sample ``i`` reads the input at position
    ``i / (n_points - 1) * (len(samples) - 1)``.
    """

    source = as_1d_array(samples, "samples", dtype=float, allow_empty=True)
    n = as_point_count(n_points, "n_points")
    if source.size == n:
        return source.copy()
    if source.size == 0:
        return np.zeros(n, dtype=float)
    if n <= 1:
        return source[:n].copy()

    positions = np.arange(n, dtype=float) / (n - 1) * (source.size - 1)
    return np.interp(positions, np.arange(source.size, dtype=float), source)


def apply_brush_stroke(
    samples: np.ndarray | Sequence[float],
    x_ratio: float,
    y_ratio: float,
    *,
    brush_size: int = DEFAULT_BRUSH_SIZE,
) -> np.ndarray:
    """Paint one pointer position onto a copy of ``samples``.

    ``x_ratio`` and ``y_ratio`` are the pointer position within the drawing
    area, each in ``[0, 1]`` with ``y`` growing downward.  The value
    ``(0.5 - y_ratio) * 2`` is written to every index within ``brush_size``
    of the pointer column.
    """

    updated = as_1d_array(samples, "samples", dtype=float, allow_empty=True).copy()
    n = updated.size
    if n == 0:
        return updated
    if brush_size < 0:
        raise ValueError("brush_size must be non-negative.")

    center = int(np.floor(min(max(float(x_ratio) * n, 0.0), n - 1)))
    value = (0.5 - float(y_ratio)) * 2.0
    low = max(center - int(brush_size), 0)
    high = min(center + int(brush_size), n - 1)
    updated[low : high + 1] = value
    return updated


def _resolve_rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


__all__ = [
    "DEFAULT_BRUSH_SIZE",
    "DEFAULT_EQUATION",
    "DEFAULT_RESOLUTION",
    "RESOLUTION_OPTIONS",
    "apply_brush_stroke",
    "default_signal",
    "evaluate_equation",
    "generate_multi_tone",
    "parse_number_list",
    "resample_linear",
    "stretch_numbers",
    "unit_positions",
]
