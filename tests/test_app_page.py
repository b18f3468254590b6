import os
import unittest
from unittest.mock import MagicMock, patch

from streamlit.testing.v1 import AppTest

from gym_board.program_loader import NO_CACHE_HEADERS


APP_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "app.py")

SCENARIO_CSV = """activityDay,activityOrderNr,activity,warmup,setsMin,setsMax,repsMin,repsMax,repsUnit
Day 1,2,Squat,0,3,3,8,8,repetitions
Day 1,1,Jump Rope,1,1,1,60,60,seconds
"""


def _response(status_code, text="", reason=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.reason = reason
    return response


class ProgramPageAppTests(unittest.TestCase):
    def setUp(self):
        self.env = patch.dict(os.environ, {}, clear=False)
        self.env.start()
        os.environ.pop("GYM_PROGRAM_BASE_URL", None)
        os.environ.pop("GYM_PROGRAM_CSV", None)
        self.addCleanup(self.env.stop)

        dotenv = patch("gym_board.ui_utils.load_dotenv")
        dotenv.start()
        self.addCleanup(dotenv.stop)

        self.get = patch("gym_board.program_loader.requests.get").start()
        self.addCleanup(patch.stopall)

    def _run_app(self):
        at = AppTest.from_file(APP_PATH, default_timeout=30)
        at.run()
        self.assertEqual(len(at.exception), 0)
        return at

    def _main_button_labels(self, at):
        return [button.label for button in at.main.button]

    def _markdown_after_header(self, at):
        values = [element.value for element in at.main.markdown]
        header_index = next(i for i, value in enumerate(values) if 'class="sub-header"' in value)
        return values[header_index + 1:]

    def test_first_run_renders_exercises_in_order(self):
        self.get.return_value = _response(200, SCENARIO_CSV, "OK")

        at = self._run_app()

        self.assertEqual(
            [button.key for button in at.main.button],
            ["done_btn_Day-1-1-Jump-Rope", "done_btn_Day-1-2-Squat"],
        )
        self.assertEqual(self._main_button_labels(at), ["Done", "Done"])
        after_header = self._markdown_after_header(at)
        self.assertFalse(any("status-banner" in value for value in after_header))
        self.assertIn("Jump Rope", "".join(after_header))

    def test_fetch_goes_to_the_app_static_file_without_cache(self):
        self.get.return_value = _response(200, SCENARIO_CSV, "OK")

        self._run_app()

        self.get.assert_called_once()
        url = self.get.call_args.args[0]
        self.assertTrue(url.startswith("http://localhost:"))
        self.assertTrue(url.endswith("/app/static/gym.csv"))
        self.assertEqual(self.get.call_args.kwargs["headers"], NO_CACHE_HEADERS)
        self.assertIsNone(self.get.call_args.kwargs["timeout"])

    def test_done_button_toggles_without_refetching(self):
        self.get.return_value = _response(200, SCENARIO_CSV, "OK")
        at = self._run_app()

        at.button(key="done_btn_Day-1-1-Jump-Rope").click().run()
        self.assertEqual(self._main_button_labels(at), ["✓ Done!", "Done"])
        self.assertIn('class="exercise warmup done"', "".join(self._markdown_after_header(at)))

        at.button(key="done_btn_Day-1-1-Jump-Rope").click().run()
        self.assertEqual(self._main_button_labels(at), ["Done", "Done"])

        self.assertEqual(self.get.call_count, 1)

    def test_missing_file_leaves_only_the_error_banner(self):
        self.get.return_value = _response(404, "", "Not Found")

        with patch("builtins.print"), patch("traceback.print_exc"):
            at = self._run_app()

        self.assertEqual(self._main_button_labels(at), [])
        after_header = self._markdown_after_header(at)
        self.assertEqual(len(after_header), 1)
        self.assertIn("status-banner error", after_header[0])
        self.assertIn("Could not load gym.csv", after_header[0])

    def test_failed_load_is_not_retried_until_reload(self):
        self.get.return_value = _response(404, "", "Not Found")

        with patch("builtins.print"), patch("traceback.print_exc"):
            at = self._run_app()
            at.run()

            self.assertEqual(self.get.call_count, 1)
            self.assertIn("status-banner error", self._markdown_after_header(at)[-1])

            self.get.return_value = _response(200, SCENARIO_CSV, "OK")
            at.button(key="reload_program").click().run()

        self.assertEqual(self.get.call_count, 2)
        self.assertEqual(self._main_button_labels(at), ["Done", "Done"])


if __name__ == "__main__":
    unittest.main()
