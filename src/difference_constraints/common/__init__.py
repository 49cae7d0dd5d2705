from difference_constraints.common.instance_io import (
    format_verdict,
    parse_test_cases,
    read_json_test_cases,
    read_test_cases,
    write_verdicts,
)

__all__ = [
    "format_verdict",
    "parse_test_cases",
    "read_json_test_cases",
    "read_test_cases",
    "write_verdicts",
]
