"""Core models and helpers exposed at the package level."""
from .comparator import compare_text, evaluate
from .directives import extract_time_limit, read_time_limit
from .models import CasePaths, CaseResult, ComparisonResult, DiffRow, ExecutionResult, Verdict
from .paths import answer_path, case_paths, input_path, list_ids, output_path
from .recorder import TestCaseRecorder

__all__ = [
    "CasePaths",
    "CaseResult",
    "ComparisonResult",
    "DiffRow",
    "ExecutionResult",
    "TestCaseRecorder",
    "Verdict",
    "answer_path",
    "case_paths",
    "compare_text",
    "evaluate",
    "extract_time_limit",
    "input_path",
    "list_ids",
    "output_path",
    "read_time_limit",
]
