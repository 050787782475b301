"""Utilities shared across the rletext fuzzing harnesses"""

import logging

import atheris

# Runs longer than this are clamped so a single huge count cannot exhaust
# memory during fuzzing.
FUZZ_MAX_RUN = 10_000


def prepare_rletext_fuzzing() -> None:
    """Used to disable logging of the rletext module"""
    logging.getLogger("rletext").setLevel(logging.CRITICAL)


@atheris.instrument_func  # type: ignore[misc]
def check_output(data: bytes) -> None:
    """Decoded output is empty or ends with a newline."""
    assert not data or data.endswith(b"\n"), data[-16:]
