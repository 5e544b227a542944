import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """terminal color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class CaseAssertionError(AssertionError):
    """distinguishes assertion failures from unexpected exceptions."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """raise a catchable assertion error when condition is falsy."""
    if not condition:
        raise CaseAssertionError(message)


def assert_raises(expected: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """call func and require it to raise expected (or a subclass). returns the exception."""
    try:
        result = func(*args, **kwargs)
    except expected as e:
        return e
    except Exception as e:
        raise CaseAssertionError(
            f"expected {expected.__name__}, got {type(e).__name__}: {e}") from e
    raise CaseAssertionError(f"expected {expected.__name__}, but call returned {result!r}")


def run(title: str = "test run") -> int:
    """executes all registered cases, prints a report and returns the failure count."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for case in _suite_state['tests']:
        passed = False
        error = None

        try:
            case['func']()
            passed = True
        except CaseAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        _suite_state['results'].append({'passed': passed, 'description': case['description'], 'error': error})

        if passed:
            print(f"  {_c.ok}pass{_c.reset}  {case['description']}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {case['description']}")
            print(f"    {_c.grey}-> {error}{_c.reset}")

    failed = _print_summary(start_time)

    # clear so several modules can run in one process
    _suite_state['tests'] = []
    return failed


def _print_summary(start_time: float) -> int:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} cases in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    return failed_count
