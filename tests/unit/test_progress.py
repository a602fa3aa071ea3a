from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock, call, patch

from searchterms.services.progress import ProgressTracker, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch('sys.stdout.isatty', return_value=True):
        assert is_tty_enabled() is True

    with patch('sys.stdout.isatty', return_value=False):
        assert is_tty_enabled() is False


class TestProgressTracker:
    """ProgressTracker with and without a TTY."""

    def test_init_with_tty_enabled(self):
        with patch('searchterms.services.progress.is_tty_enabled', return_value=True), \
             patch('searchterms.services.progress.tqdm') as mock_tqdm:

            tracker = ProgressTracker(3)

            assert tracker.pbar is mock_tqdm.return_value
            assert tracker.description == "Parsing exports"
            mock_tqdm.assert_called_once_with(
                total=3,
                desc="Parsing exports",
                unit="file",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )

    def test_counts_without_tty(self):
        with patch('searchterms.services.progress.is_tty_enabled', return_value=False), \
             patch('searchterms.services.progress.tqdm') as mock_tqdm:

            with ProgressTracker(3) as tracker:
                assert tracker.pbar is None
                tracker.start_file(Path("a.csv"))
                tracker.finish_file(success=True, data_rows=4)
                tracker.finish_file(success=False, data_rows=9)
                tracker.finish_file(success=True)

            mock_tqdm.assert_not_called()
            assert (tracker.succeeded, tracker.failed, tracker.data_rows) == (2, 1, 4)

    def test_finish_file_sets_postfix_from_counters(self):
        mock_pbar = Mock()

        with patch('searchterms.services.progress.is_tty_enabled', return_value=True), \
             patch('searchterms.services.progress.tqdm', return_value=mock_pbar):

            with ProgressTracker(2, description="Parsing") as tracker:
                tracker.start_file(Path("/data/en.csv"))
                mock_pbar.set_description.assert_called_with("Parsing (en.csv)")
                tracker.finish_file(success=True, data_rows=3)
                mock_pbar.set_description.assert_called_with("Parsing")
                tracker.finish_file(success=False)

            assert mock_pbar.set_postfix.call_args_list == [
                call(success=1, failed=0, rows=3),
                call(success=1, failed=1, rows=3),
            ]
            assert mock_pbar.update.call_args_list == [call(1), call(1)]
            mock_pbar.close.assert_called_once()
            assert tracker.pbar is None
