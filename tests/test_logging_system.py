import pytest

from expression_cse import (
  make_constant, make_variable, make_binary, OperatorKind,
  ExpressionOptimizer, LogLevel, configure_logging, get_logger, set_log_level
)
from expression_cse.logging_system import log_info


@pytest.fixture
def restore_logging():
  yield
  configure_logging()


def sample():
  return make_binary(make_variable('x'), make_constant(2), OperatorKind.PLUS)


def test_default_level_is_quiet(capsys, restore_logging):
  configure_logging()
  ExpressionOptimizer().optimize(sample())
  assert capsys.readouterr().out == ''


def test_console_log_reports_optimized_expression(capsys, restore_logging):
  configure_logging()
  ExpressionOptimizer(console_log=True).optimize(sample())
  assert 'Optimized expression: (2 + x)' in capsys.readouterr().out


def test_verbose_level_reports_cache_size(capsys, restore_logging):
  configure_logging(LogLevel.VERBOSE)
  ExpressionOptimizer().optimize_with_stats(sample())
  out = capsys.readouterr().out
  assert '3 cached subexpressions' in out
  assert 'duplicates_removed' in out


def test_silent_level_and_set_log_level(capsys, restore_logging):
  configure_logging(LogLevel.SILENT)
  ExpressionOptimizer(console_log=True).optimize(sample())
  assert capsys.readouterr().out == ''

  set_log_level(LogLevel.MODERATE)
  assert get_logger().log_level is LogLevel.MODERATE
  log_info('cse ready')
  assert 'cse ready' in capsys.readouterr().out


def test_raising_silent_level_keeps_file_output(tmp_path, capsys, restore_logging):
  log_path = tmp_path / 'cse.log'
  configure_logging(LogLevel.SILENT, log_to_file=True, log_file_path=str(log_path))
  set_log_level(LogLevel.MODERATE)

  assert get_logger().log_file_path == str(log_path)
  log_info('hello-file')

  assert 'hello-file' in log_path.read_text()
  assert 'hello-file' in capsys.readouterr().out


def test_warnings_shown_from_minimal_level(capsys, restore_logging):
  configure_logging(LogLevel.MINIMAL)
  get_logger().warning('deep tree')
  assert 'deep tree' in capsys.readouterr().out

  configure_logging(LogLevel.SILENT)
  get_logger().warning('deep tree')
  assert capsys.readouterr().out == ''
