"""
Pytest configuration and shared fixtures for wrapgen tests.

Provides sample interface descriptions, header sources and helpers for
executing generated Python wrappers.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import pytest

from wrapgen.core.interface import convert_parser_output
from wrapgen.languages.javascript import JavaScriptGenerator
from wrapgen.languages.python import PythonGenerator
from wrapgen.core.config import load_config


SAMPLE_HEADER = """\
#import <Foundation/Foundation.h>

NS_ASSUME_NONNULL_BEGIN

@interface GREYActions : NSObject

/**
 *  Returns an action that taps at a point.
 *
 *  @param point The point to tap.
 */
+ (id<GREYAction>)actionForTapAtPoint:(CGPoint)point;

// Swipes in the given direction.
- (void)swipeWithDirection:(GREYDirection)direction speed:(CGFloat)speed;

- (void)tap;

- (void)typeText:(nullable NSString*)text;

@end

NS_ASSUME_NONNULL_END
"""


@pytest.fixture(autouse=True)
def reset_wrapgen_logger():
    """Undo handler setup done by the CLI so caplog sees wrapgen records."""
    yield
    logger = logging.getLogger("wrapgen")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def basic_interface_dict() -> Dict[str, Any]:
    """Parser output for a class exercising every registered type shape."""
    return {
        "name": "BasicName",
        "methods": [
            {
                "args": [{"type": "NSInteger", "name": "argOne"}],
                "comment": "This is the comment of basic method one",
                "name": "basicMethodOneWithArgOne:",
                "returnType": "NSInteger",
                "static": False,
            },
            {
                "args": [
                    {"type": "NSString *", "name": "title"},
                    {"type": "CGPoint", "name": "point"},
                ],
                "comment": "Places a title.\nThe point is in screen coordinates.",
                "name": "placeTitle:atPoint:",
                "returnType": "void",
                "static": False,
            },
            {
                "args": [{"type": "GREYDirection", "name": "direction"}],
                "name": "swipeInDirection:",
                "returnType": "id",
                "static": True,
            },
            {
                "args": [{"type": "id<GREYMatcher>", "name": "matcher"}],
                "name": "selectElementWithMatcher:",
                "static": True,
            },
        ],
    }


@pytest.fixture
def basic_interface(basic_interface_dict):
    """InterfaceDescription built from the basic parser output."""
    return convert_parser_output(basic_interface_dict)


@pytest.fixture
def foo_interface_dict() -> Dict[str, Any]:
    """Single-method interface."""
    return {
        "name": "Foo",
        "methods": [
            {
                "name": "doWithBar",
                "args": [{"name": "bar", "type": "NSInteger"}],
                "returnType": "void",
                "comment": None,
                "static": False,
            }
        ],
    }


@pytest.fixture
def foo_interface(foo_interface_dict):
    return convert_parser_output(foo_interface_dict)


@pytest.fixture
def sample_header() -> str:
    return SAMPLE_HEADER


@pytest.fixture
def js_generator():
    return JavaScriptGenerator(load_config("javascript"))


@pytest.fixture
def py_generator():
    return PythonGenerator(load_config("python"))


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document below tmp_path and return its path."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def load_python_wrapper():
    """Execute generated Python source and return its module namespace."""

    def _load(code: str) -> Dict[str, Any]:
        namespace: Dict[str, Any] = {"__name__": "generated_wrapper"}
        exec(compile(code, "<generated>", "exec"), namespace)
        return namespace

    return _load
