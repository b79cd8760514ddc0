"""
Help rendering tests (layout, visibility, targets).

Scope
- Validate the exact plain-text layout of get_help_text().
- Validate that hidden options, arguments and commands are left out.
- Validate child targets, the separator hint, the epilog and the banner.

Conventions
- Test method names follow CamelCase per project convention.
- get_help_text() is compared as plain text; show_help() output is read back
  from an in-memory rich console.
"""

from __future__ import annotations

import io
import unittest
from unittest import TestCase

from rich.console import Console

from argtree import Command, OptionType


def quiet(name="app", /, **options):
    return Command(name, out=Console(file=io.StringIO(), width=200), **options)


class TestHelpLayout(TestCase):
    """Exact layout of the generated help."""

    def testFullLayout(self):
        app = quiet()
        app.argument("file", "The file")
        app.option("-v|--verbose", "Verbose", OptionType.NO_VALUE)
        app.help_option("-h|--help")
        app.command("b-cmd", descr="B")
        app.command("a-cmd", descr="A")

        self.assertEqual(
            app.get_help_text(),
            "app\n"
            "\n"
            "Usage: app [arguments] [options] [command]\n"
            "\n"
            "Arguments:\n"
            "  file  The file\n"
            "\n"
            "Options:\n"
            "  -v|--verbose  Verbose\n"
            "  -h|--help     Show help information\n"
            "\n"
            "Commands:\n"
            "  a-cmd  A\n"
            "  b-cmd  B\n"
            "\n"
            'Use "app [command] --help" for more information about a command.\n',
        )

    def testBareCommand(self):
        self.assertEqual(quiet().get_help_text(), "app\n\nUsage: app\n")

    def testCommandsWithoutHelpOptionHaveNoNote(self):
        app = quiet()
        app.command("run", descr="Run it")
        self.assertEqual(
            app.get_help_text(),
            "app\n\nUsage: app [command]\n\nCommands:\n  run  Run it\n",
        )

    def testBannerShowsShortVersion(self):
        app = quiet(full_name="Demo Tool")
        app.version_option("--version", "1.2", "1.2.3+build")
        self.assertTrue(app.get_help_text().startswith("Demo Tool 1.2\n\nUsage: app [options]\n"))
        self.assertEqual(app.get_full_name_and_version(), "Demo Tool 1.2")

    def testSeparatorHint(self):
        app = quiet(allow_argument_separator=True)
        self.assertIn("Usage: app [[--] <arg>...]\n", app.get_help_text())

    def testEpilogIsAppendedVerbatim(self):
        app = quiet(epilog="See the manual.\n")
        self.assertTrue(app.get_help_text().endswith("Usage: app\nSee the manual.\n"))

    def testUsageListsFullPath(self):
        app = quiet()
        child = app.command("remote").command("add")
        self.assertIn("Usage: app remote add\n", child.get_help_text())


class TestHelpVisibility(TestCase):
    """Hidden declarations and inherited options."""

    def testHelpTextIgnoresHiddenItems(self):
        app = quiet("ninja-app")
        app.command("star", hidden=True).option("--points <p>", "How many", OptionType.MULTIPLE_VALUE)
        app.option("--smile", "Be a nice ninja", OptionType.NO_VALUE, hidden=True)
        app.argument("name", "Pseudonym, of course", hidden=True)

        help = app.get_help_text()
        self.assertIn("ninja-app", help)
        self.assertNotIn("star", help)
        self.assertNotIn("--points", help)
        self.assertNotIn("--smile", help)
        self.assertNotIn("Pseudonym", help)
        self.assertNotIn("[arguments]", help)

    def testHelpTextUsesHelpOptionName(self):
        app = quiet()
        app.help_option("--ayuda-me")
        app.command("sub")
        help = app.get_help_text()
        self.assertIn("--ayuda-me", help)
        self.assertIn('Use "app [command] --ayuda-me"', help)

    def testNoteFallsBackToShortName(self):
        app = quiet()
        app.help_option("-?")
        app.command("sub")
        self.assertIn('Use "app [command] -?"', app.get_help_text())

    def testInheritedOptionsAppearInChildHelp(self):
        app = quiet()
        app.option("-g|--global", "Everywhere", inherited=True)
        app.option("--local", "Only here")
        help = app.command("child").get_help_text()
        self.assertIn("-g|--global", help)
        self.assertNotIn("--local", help)


class TestHelpTargets(TestCase):
    """Help of a named child and the side effects of showing it."""

    def setUp(self):
        self.app = quiet()
        self.app.help_option("-h|--help", inherited=True)
        self.build = self.app.command("build", descr="Build things")
        self.build.option("--release", "Optimized build", OptionType.NO_VALUE)

    def testChildTarget(self):
        help = self.app.get_help_text("build")
        self.assertIn("Usage: app build [options]\n", help)
        self.assertIn("--release", help)

    def testChildTargetIsCaseInsensitive(self):
        help = self.app.get_help_text("BUILD")
        self.assertIn("Usage: app BUILD [options]\n", help)
        self.assertIn("--release", help)

    def testUnknownTargetFallsBackToSelf(self):
        self.assertEqual(self.app.get_help_text("nothing"), self.app.get_help_text())

    def testGetHelpTextIsPure(self):
        first = self.app.get_help_text()
        self.assertFalse(self.app.showing_information)
        self.assertEqual(self.app.get_help_text(), first)

    def testShowHelpPrintsAndFlags(self):
        self.build.show_help()
        self.assertTrue(self.build.showing_information)
        self.assertTrue(self.app.showing_information)
        self.assertEqual(self.app.out.file.getvalue(), self.build.get_help_text())

    def testShowHint(self):
        self.build.show_hint()
        self.assertEqual(
            self.app.out.file.getvalue(),
            "Specify --help for a list of available options and commands.\n",
        )

    def testShowHintWithoutHelpOptionIsSilent(self):
        app = quiet()
        app.show_hint()
        self.assertEqual(app.out.file.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
