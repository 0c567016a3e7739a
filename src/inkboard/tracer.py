"""
Hierarchical runtime tracing for inkboard.

Nested spans with timing for the geometry engine and the layers around it.
Disabled by default so that pointer-move handlers pay nothing for it.
"""

import functools
import hashlib
import json
import sys
import time
from contextlib import contextmanager
from datetime import datetime

import numpy as np
from pydantic import BaseModel

from inkboard.models import Point, Stroke


class TracerConfig:
    """Output settings for the tracer."""

    def __init__(self):
        self.enabled = False
        self.level = "INFO"
        self.file_path = None
        self.json_output = False
        self._file_handle = None

    def configure(self, enabled=False, level="INFO", file_path=None, json_output=False):
        """Apply new settings, reopening the trace file if one is requested."""
        self.enabled = enabled
        self.level = level.upper()
        self.file_path = file_path
        self.json_output = json_output

        self.close()

        if file_path and enabled:
            self._file_handle = open(file_path, "w", encoding="utf-8")

    def close(self):
        """Close the trace file if open."""
        if self._file_handle:
            self._file_handle.close()
            self._file_handle = None


class Tracer:
    """
    Hierarchical tracer.

    Spans nest and indent their output; events attach to the innermost span.
    Lines go to stderr and, when configured, to a file and as JSON records.
    """

    LEVELS = {"ERROR": 0, "WARN": 1, "INFO": 2, "DEBUG": 3}

    def __init__(self):
        self.config = TracerConfig()
        self._depth = 0
        self._span_stack = []

    def _should_log(self, level):
        if not self.config.enabled:
            return False
        return self.LEVELS.get(level, 2) <= self.LEVELS.get(self.config.level, 2)

    def _timestamp(self):
        now = datetime.now()
        return now.strftime("%H:%M:%S.") + f"{now.microsecond // 1000:03d}"

    def _emit(self, line):
        print(line, file=sys.stderr)
        if self.config._file_handle:
            self.config._file_handle.write(line + "\n")
            self.config._file_handle.flush()

    def _write(self, level, module, func, message, meta=None):
        if not self._should_log(level):
            return

        timestamp = self._timestamp()
        location = f"{module}:{func}" if func else module
        self._emit(f"{timestamp} {level:<5} {'  ' * self._depth}{location}  {message}")

        if self.config.json_output:
            record = {
                "timestamp": timestamp,
                "level": level,
                "depth": self._depth,
                "module": module,
                "function": func,
                "message": message,
                "meta": {k: summarize(v) for k, v in (meta or {}).items()},
            }
            self._emit(json.dumps(record))

    @contextmanager
    def span(self, name, module="", **meta):
        """
        Trace a block of work.

        Logs start and end with elapsed milliseconds. Exceptions are logged
        at ERROR and re-raised.
        """
        if not self.config.enabled:
            yield
            return

        start_time = time.perf_counter()
        meta_str = " ".join(f"{k}={summarize(v)}" for k, v in meta.items())
        self._write("INFO", module, name, f"start {meta_str}".strip())
        self._depth += 1
        self._span_stack.append((name, module))

        try:
            yield
        except Exception as e:
            elapsed = (time.perf_counter() - start_time) * 1000
            self._depth -= 1
            self._span_stack.pop()
            self._write("ERROR", module, name, f"failed dt={elapsed:.1f}ms error={type(e).__name__}: {str(e)[:100]}")
            raise

        elapsed = (time.perf_counter() - start_time) * 1000
        self._depth -= 1
        self._span_stack.pop()
        self._write("INFO", module, name, f"end ok dt={elapsed:.1f}ms")

    def event(self, message, level="INFO", **meta):
        """Log a one-off event within the current span."""
        if not self._should_log(level):
            return

        func, module = self._span_stack[-1] if self._span_stack else ("", "")
        meta_str = " ".join(f"{k}={summarize(v)}" for k, v in meta.items())
        self._write(level, module, func, f"{message} {meta_str}".strip(), meta)


def summarize(obj, max_len=200):
    """
    Compact, length-capped description of an object for trace lines.

    Points print their coordinates, strokes their size and shape flag,
    point sequences their length and endpoints.
    """
    try:
        result = _summarize_impl(obj)
    except Exception:
        return f"<{type(obj).__name__}>"
    if len(result) > max_len:
        return result[:max_len - 3] + "..."
    return result


def _summarize_impl(obj):
    if obj is None:
        return "None"

    type_name = type(obj).__name__

    if isinstance(obj, Point):
        return f"({obj.x:.1f},{obj.y:.1f})"

    if isinstance(obj, Stroke):
        return f"Stroke(n={len(obj.points)},tool={obj.tool.value},shape={obj.is_shape})"

    if isinstance(obj, np.ndarray):
        shape_str = "x".join(str(s) for s in obj.shape)
        if 0 < obj.size < 1000:
            h = hashlib.md5(obj.tobytes()).hexdigest()[:8]
            return f"ndarray({obj.dtype},{shape_str},h={h})"
        return f"ndarray({obj.dtype},{shape_str})"

    if isinstance(obj, BaseModel):
        fields = list(type(obj).model_fields.keys())[:3]
        return f"{type_name}(fields={fields}...)"

    if isinstance(obj, str):
        if len(obj) > 50:
            h = hashlib.md5(obj.encode()).hexdigest()[:8]
            return f"str(len={len(obj)},h={h})"
        return repr(obj)

    if isinstance(obj, (list, tuple)):
        if not obj:
            return f"{type_name}(len=0)"
        if isinstance(obj[0], Point):
            return f"{type_name}(len={len(obj)},{_summarize_impl(obj[0])}..{_summarize_impl(obj[-1])})"
        return f"{type_name}(len={len(obj)},first={type(obj[0]).__name__})"

    if isinstance(obj, dict):
        keys = ",".join(str(k) for k in list(obj.keys())[:5])
        return f"dict(len={len(obj)},keys=[{keys}])"

    if isinstance(obj, bool):
        return str(obj)

    if isinstance(obj, float):
        return f"{obj:.4g}"

    if isinstance(obj, int):
        return str(obj)

    return f"<{type_name}>"


def trace(label=None, arg_names=None):
    """
    Decorator wrapping a function call in a span.

    arg_names selects keyword arguments to record in the span's start line.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not _tracer.config.enabled:
                return func(*args, **kwargs)

            func_module = func.__module__.split(".")[-1] if func.__module__ else ""
            meta = {name: kwargs[name] for name in (arg_names or ()) if name in kwargs}

            with _tracer.span(label or func.__name__, module=func_module, **meta):
                return func(*args, **kwargs)

        return wrapper
    return decorator


_tracer = Tracer()


def get_tracer():
    """Get the global tracer instance."""
    return _tracer


def configure_tracer(enabled=False, level="INFO", file_path=None, json_output=False):
    """Configure the global tracer."""
    _tracer.config.configure(
        enabled=enabled,
        level=level,
        file_path=file_path,
        json_output=json_output,
    )
