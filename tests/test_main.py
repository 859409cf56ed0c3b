import io
import os
import sys
import unittest
from contextlib import redirect_stdout

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import main


def run(*args):
    buf = io.StringIO()
    with redirect_stdout(buf):
        code = main.main(["main.py", *args])
    return code, buf.getvalue().splitlines()


class TestMain(unittest.TestCase):
    def test_task1_builds_scenario(self):
        code, lines = run("task1")
        self.assertEqual(code, 0)
        self.assertEqual(lines[0], "&-=-& start-task1")
        self.assertIn("after-insert: (5) -> (10) -> (15) -> (20) -> null size=4", lines)
        self.assertIn("ok=False", lines)
        self.assertIn("at(2)=15", lines)
        self.assertIn("at(4)=N/A", lines)

    def test_task2_remove_and_search(self):
        code, lines = run("task2")
        self.assertEqual(code, 0)
        self.assertIn("removed=5", lines)
        self.assertIn("removed=None", lines)
        self.assertIn("popped=20", lines)
        self.assertIn("after-pop: (10) -> (15) -> null size=2", lines)
        self.assertIn("find(15)=1 find(20)=None", lines)
        self.assertIn("drained: null size=0", lines)

    def test_default_runs_all_tasks(self):
        code, lines = run()
        self.assertEqual(code, 0)
        starts = [l for l in lines if l.startswith(main.DELIM + " start-")]
        self.assertEqual(starts, [
            "&-=-& start-task1",
            "&-=-& start-task2",
        ])

    def test_unknown_task_runs_build_and_search_only(self):
        code, lines = run("task3")
        self.assertEqual(code, 0)
        starts = [l for l in lines if l.startswith(main.DELIM + " start-")]
        self.assertEqual(starts, ["&-=-& start-task1", "&-=-& start-task2"])


if __name__ == "__main__":
    unittest.main()
