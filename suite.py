import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'cases': [],
    'results': []
}


class _c:
    """ansi color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """distinguishes assertion failures from other exceptions in the report."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """register a function as a test case; the function stays callable as-is."""

    def decorator(func: Callable) -> Callable:
        _suite_state['cases'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


# test modules alias this as `test`; keep pytest from collecting the alias itself
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(expected: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """call func and return the exception it raised, failing unless it is an `expected`."""
    try:
        func(*args, **kwargs)
    except expected as e:
        return e
    raise SuiteAssertionError(f"expected {expected.__name__} to be raised")


def run(title: str = "test run") -> bool:
    """execute every registered case, print a report, and return true if all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()
    results = []

    for case in _suite_state['cases']:
        error = None
        try:
            case['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        results.append({'passed': error is None, 'description': case['description'], 'error': error})

        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {case['description']}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {case['description']}")
            print(f"        {_c.grey}{error}{_c.reset}")

    _suite_state['results'] = results
    _suite_state['cases'] = []
    return _print_summary(results, start_time)


def _print_summary(results: List[Dict[str, Any]], start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    failed = sum(1 for r in results if not r['passed'])
    color = _c.ok if failed == 0 else _c.fail

    print(f"\n{color}ran {len(results)} cases in {duration:.2f}ms: "
          f"{len(results) - failed} passed, {failed} failed{_c.reset}\n")
    return failed == 0
