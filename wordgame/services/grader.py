"""
Letter Grader

Grades a guess against a target word, one verdict per letter position.
"""

from typing import Dict, List

from ..models.game import Verdict


def grade(guess: str, target: str) -> List[Verdict]:
    """
    Implements the two-pass, duplicate-safe letter evaluation.

    Exact matches are marked first. Target letters that were not matched
    are then counted, and each remaining guess letter (left to right)
    consumes one of those counts to become ALMOST. A guess letter repeated
    more often than the target holds it is therefore never over-credited.

    Args:
        guess: Normalized guess
        target: Target word of the same length

    Returns:
        List[Verdict]: One verdict per position

    Raises:
        ValueError: If the two words differ in length
    """
    if len(guess) != len(target):
        raise ValueError(f"Guess length {len(guess)} does not match target length {len(target)}")

    verdicts: List[Verdict] = [Verdict.INCORRECT] * len(guess)
    unmatched: Dict[str, int] = {}

    # First pass: exact position matches
    for i, (guess_letter, target_letter) in enumerate(zip(guess, target)):
        if guess_letter == target_letter:
            verdicts[i] = Verdict.CORRECT
        else:
            unmatched[target_letter] = unmatched.get(target_letter, 0) + 1

    # Second pass: letters present elsewhere
    for i, guess_letter in enumerate(guess):
        if verdicts[i] is Verdict.CORRECT:
            continue
        if unmatched.get(guess_letter, 0) > 0:
            verdicts[i] = Verdict.ALMOST
            unmatched[guess_letter] -= 1

    return verdicts
