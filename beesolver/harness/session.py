"""
Interactive console session.

Runs the question-and-answer flow around a scan:
  1) ask for a dictionary (empty answer = default; reprompt while unreadable)
  2) ask for the hive letters, middle letter first
  3) scan and report the count
  4) offer to save the words to a file, else offer to print them

`ask` and `say` default to input()/print() (looked up at call time);
tests pass fakes.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, List

from beesolver.datasets import is_readable, pretty_summary, validate_dictionary, write_lines
from beesolver.engine import Hive, SolverConfig, DEFAULT_CONFIG
from .scan import ScanResult, scan_file

logger = logging.getLogger(__name__)

Ask = Callable[[str], str]
Say = Callable[[str], None]


def _ask(prompt: str) -> str:
    return input(prompt)


def _say(text: str) -> None:
    print(text)


def _yes(answer: str) -> bool:
    return answer[:1].lower() == "y"


def check_dictionary(path: str, config: SolverConfig = DEFAULT_CONFIG) -> Dict:
    """
    Log a health summary for the dictionary; warn about each issue found.
    Returns the validator report.
    """
    rep = validate_dictionary(path, config)
    logger.info("%s", pretty_summary(rep))
    for issue in rep["issues"]:
        logger.warning("%s: %s", path, issue)
    return rep


def prompt_dictionary(config: SolverConfig = DEFAULT_CONFIG, ask: Ask = _ask) -> str:
    """
    Ask for a dictionary filename until the answer is empty or readable.
    Returns the chosen filename (the configured default for an empty answer).
    """
    name = ask("Enter the filename of the dictionary you want to use "
               f"(hit enter for \"{config.default_dictionary}\"): ")
    while name != "" and not is_readable(name):
        name = ask(f"File \"{name}\" does not exist. Please try again: ")

    return name if name != "" else config.default_dictionary


def prompt_hive(ask: Ask = _ask) -> Hive:
    """Ask for the hive letters (middle letter first) until something is typed."""
    text = ask("Enter each letter starting with the middle letter: ")
    while not text.strip():
        text = ask("Please enter at least one letter: ")
    return Hive.from_input(text)


def deliver_results(words: List[str], ask: Ask = _ask, say: Say = _say) -> None:
    """
    Offer to save `words` to a file; if declined, offer to print them.
    """
    if _yes(ask(f"{len(words)} words found! Would you like to save them to a file? (y/n): ")):
        out = ask("Enter the output filename: ")
        while not out.strip():
            out = ask("Please enter a filename: ")
        write_lines(words, out)
    elif _yes(ask("Would you like to print them out? (y/n): ")):
        for w in words:
            say(w)
    else:
        say("Alright, goodbye!")


def run_session(
        config: SolverConfig = DEFAULT_CONFIG,
        *,
        ask: Ask = _ask,
        say: Say = _say,
        progress: bool = False,
) -> ScanResult:
    """
    Run the whole interactive flow once. Returns the scan result.
    """
    dictionary = prompt_dictionary(config, ask)
    logger.info("using dictionary %s", dictionary)
    check_dictionary(dictionary, config)

    hive = prompt_hive(ask)
    logger.info("hive %s", hive)

    try:
        result = scan_file(dictionary, hive, config, progress=progress)
    except OSError as e:
        # Only reachable through the default name; typed names were checked above.
        logger.warning("dictionary %s unavailable (%s); nothing to scan", dictionary, e)
        result = ScanResult(0, [])

    deliver_results(result.words, ask, say)
    say("Have a nice day!")
    return result
