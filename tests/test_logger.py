import logging
import unittest

from celestius.core.logger import PROJECT_LOGGER, configure_logging


class LoggerTests(unittest.TestCase):
    def test_configure_is_idempotent(self):
        project = configure_logging("debug")
        handlers = list(project.handlers)
        self.assertEqual(project.level, logging.DEBUG)

        again = configure_logging("warning")
        self.assertIs(again, project)
        self.assertEqual(again.handlers, handlers)
        self.assertEqual(again.level, logging.WARNING)

    def test_module_loggers_are_children(self):
        configure_logging("info")
        child = logging.getLogger("celestius.state.form_state")
        self.assertEqual(child.getEffectiveLevel(), logging.INFO)
        self.assertEqual(PROJECT_LOGGER, "celestius")

    def test_unknown_level_falls_back_to_info(self):
        self.assertEqual(configure_logging("chatty").level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
