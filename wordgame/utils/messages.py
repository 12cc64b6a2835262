"""
Messages

Every user-facing string lives here. The game services hand over numbers
and structures; these helpers turn them into dialog text.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from ..models.game import (
    DictionaryEntry, GuessRecord, RoundScore, RoundStatus, ScoringConfig, StandingRow,
    TurnReport, Verdict
)
from ..models.series import SeriesSummary, SoloSessionSummary

EMOJIS: Dict[Verdict, str] = {
    Verdict.CORRECT: "✅",
    Verdict.ALMOST: "🟨",
    Verdict.INCORRECT: "⬜️",
}

WELCOME = "Welcome!\n\nWould you like to play a word puzzle game?"
START_OVER = "We would love for you to play again another time."
END_GAME = "Are you sure?\n\nI bet you had a change of heart...\n\n(Answer no to end the game.)"
FAREWELL = "So sad to see you leave...\n\nThanks for playing!"
NEED_MORE_PLAYERS = "Multiplayer needs at least 2 players. Taking you back to the menu."
SOLO_NAME_PROMPT = "Optional: enter a display name (leave blank to stay anonymous)."
PLAYER_SETUP_PROMPT = (
    "How many players? Add \"yes\" to enter custom names.\n\n"
    "Example:  3 yes"
)

_MENUS = {
    "mode": "Choose a mode:\n\n    solo\n    multiplayer\n    quit",
    "rules": "Choose the rules for {mode}:\n\n    classic  (5 letters, 6 guesses, 1 game)\n    custom",
    "post": "What next?\n\n    replay\n    custom  (new rules, same mode)\n    mode  (change mode)\n    quit",
}


def menu_text(phase: str, mode: Optional[str] = None) -> str:
    return _MENUS[phase].format(mode=mode or "")


def player_names_prompt(count: int) -> str:
    return f"Enter {count} names separated by commas or spaces."


def custom_config_prompt(config: ScoringConfig, rounds: int, keep_classic_hint: bool = False) -> str:
    text = (
        "Enter word length, max guesses and number of games.\n\n"
        f"Example:  {config.word_length}, {config.max_guesses}, {rounds}"
    )
    if keep_classic_hint:
        text += "\n\n(Leave blank or cancel to keep the classic multiplayer settings.)"
    return text


def legend_line(config: ScoringConfig) -> str:
    points = config.points
    return (f"{EMOJIS[Verdict.CORRECT]} = {points.correct:+d}   "
            f"{EMOJIS[Verdict.ALMOST]} = {points.almost:+d}   "
            f"{EMOJIS[Verdict.INCORRECT]} = {points.incorrect:+d}")


def rules_info(config: ScoringConfig) -> str:
    return (
        f"Guess the secret {config.word_length}-letter word in {config.max_guesses} tries.\n\n"
        f"{legend_line(config)}\n\n"
        f"Bonus: unused tries x {config.word_length} letters x {config.points.correct} points.\n"
        "Quitting costs the same amount as a penalty."
    )


def verdict_row(verdicts: Sequence[Verdict]) -> str:
    return "  ".join(EMOJIS[verdict] for verdict in verdicts)


def board(attempts: Sequence[GuessRecord], config: ScoringConfig) -> str:
    lines = []
    for number, record in enumerate(attempts, start=1):
        lines.append(f"{number} of {config.max_guesses}:   {'   '.join(record.word.upper())}")
        lines.append(f"            {verdict_row(record.verdicts)}")
    lines.append(legend_line(config))
    return "\n".join(lines)


def prompt_guess(player: Optional[str], board_text: str) -> str:
    who = f"{player}, enter" if player else "Enter"
    return f"{who} your guess:\n\n{board_text}"


def invalid_length(actual: int, required: int, board_text: str) -> str:
    return f"That guess has {actual} characters; it needs exactly {required}. Try again:\n\n{board_text}"


def unknown_word(word: str, board_text: str) -> str:
    return f"\"{word}\" is not in the dictionary. Try again:\n\n{board_text}"


def outcome(status: RoundStatus, attempts_used: int = 0) -> str:
    if status is RoundStatus.WON:
        return f"You solved it in {attempts_used} {'attempt' if attempts_used == 1 else 'attempts'}!"
    if status is RoundStatus.LOST:
        return "Out of guesses. Better luck next time!"
    return "You quit this game."


def reveal_word(entry: DictionaryEntry) -> str:
    return f"The game word was:   {entry.word.upper()}\nDefinition:   {entry.definition}"


def round_summary(score: RoundScore) -> str:
    lines = ["Score Summary:", f"    Guess Points:   {score.guess_points}"]
    if score.bonus > 0:
        lines.append(f"    Bonus Points:   {score.bonus}")
    if score.penalty > 0:
        lines.append(f"    Quit Penalty:   - {score.penalty}")
    lines.append(f"    Total Points:   {score.total}")
    return "\n".join(lines)


def solo_running_total(total: int) -> str:
    return f"All games (solo):   {total} points"


def solo_session_summary(summary: SoloSessionSummary) -> str:
    return (
        f"SESSION SUMMARY  -->  {summary.rounds} rounds\n\n"
        f"    Total:          {summary.total} points\n"
        f"    Average Game:   {round(summary.average, 2)} points\n"
        f"    Best Game:      {summary.best} points   (Game {summary.best_at})\n"
        f"    Weakest Game:   {summary.worst} points   (Game {summary.worst_at})"
    )


def turn_explain(report: TurnReport) -> str:
    counts = report.counts
    lines = [
        f"{report.player}  --  Game {report.game_index}, attempt {report.attempt_number} of {report.max_guesses}",
        "",
        f"    {'   '.join(report.guess.word.upper())}",
        f"    {verdict_row(report.guess.verdicts)}",
        "",
        f"{counts.correct} correct, {counts.almost} almost, {counts.incorrect} incorrect  -->  {report.points} points",
        f"This game so far:   {report.running_points} points",
    ]
    if report.bonus_this_turn > 0:
        lines.append(f"Bonus:   + {report.bonus_this_turn}")
    if report.locked_bonus > 0:
        lines.append(f"Locked bonus:   {report.locked_bonus}")
    if report.running_all_games is not None:
        extra = f"   (incl. {report.bonus_all_games} bonus)" if report.bonus_all_games > 0 else ""
        lines.append(f"All games:   {report.running_all_games} points{extra}")
    return "\n".join(lines)


def skip_notice(player: str, status: RoundStatus, score: RoundScore,
                running_all_games: Optional[int] = None, running_adjustment: int = 0) -> str:
    if status is RoundStatus.WON:
        headline = f"{player} solved theirs!  -->  skipping remaining guesses..."
        this_game = f"This game:   {score.total} points" + (
            f"   (incl. {score.bonus} bonus)" if score.bonus > 0 else "")
        all_tag = f"   (incl. {running_adjustment} bonus)" if running_adjustment > 0 else ""
    elif status is RoundStatus.QUIT:
        headline = f"{player} quit this game  -->  skipping remaining guesses..."
        this_game = f"This game:   {score.total} points   (- {score.penalty} penalty)"
        all_tag = f"   (- {running_adjustment} penalty)" if running_adjustment > 0 else ""
    else:
        headline = f"{player} ran out of guesses  -->  skipping remaining turns..."
        this_game = f"This game:   {score.total} points"
        all_tag = ""

    text = f"{headline}\n\n{this_game}"
    if running_all_games is not None:
        text += f"\n\nAll games:   {running_all_games} points{all_tag}"
    return text


def _standing_tags(bonus: int, penalty: int) -> str:
    tags = []
    if bonus > 0:
        tags.append(f"incl. {bonus} bonus")
    if penalty > 0:
        tags.append(f"- {penalty} penalty")
    return f"   ({' ; '.join(tags)})" if tags else ""


def standings_snapshot(game_index: int, cycle: int, standings: Sequence[StandingRow]) -> str:
    lines = [f"STANDINGS  --  Game {game_index}, after guess cycle {cycle}", ""]
    for position, row in enumerate(standings, start=1):
        lines.append(f"    {position}.  {row.name}  --  {row.total} pts{_standing_tags(row.bonus, row.penalty)}")
    return "\n".join(lines)


def answers_reveal(game_index: int, answers: Sequence[Tuple[str, DictionaryEntry]]) -> str:
    lines = [f"ANSWERS  --  Game {game_index}", ""]
    for name, entry in answers:
        lines.append(f"    {name}  -->  {entry.word.upper()}  --  {entry.definition}")
    return "\n".join(lines)


def _highlights(summary: SeriesSummary) -> List[str]:
    lines = []
    if summary.leader_single_game:
        leader = summary.leader_single_game
        lines.append(f"Best Game:         {leader.name}   ({leader.points} points in Game {leader.game_at})")
    if summary.leader_average:
        lines.append(f"Average Game:      {summary.leader_average.name}   "
                     f"({round(summary.leader_average.average, 2)} points)")
    if summary.leader_best:
        lines.append(f"Best Attempt:      {summary.leader_best.name}   ({summary.leader_best.best} points)")
    if summary.leader_worst:
        lines.append(f"Weakest Attempt:   {summary.leader_worst.name}   ({summary.leader_worst.worst} points)")
    return lines


def series_board(title: str, summary: SeriesSummary) -> str:
    lines = [title, ""]
    for position, row in enumerate(summary.standings, start=1):
        lines.append(f"    {position}.  {row.name}  --  {row.total} points{_standing_tags(row.bonus, row.penalty)}")
    lines.append("")
    lines.extend(_highlights(summary))
    return "\n".join(lines)


def series_title(games: int) -> str:
    return f"SERIES COMPLETE  --  {games} {'game' if games == 1 else 'games'}\n\nLeaderboard (this series):"


def cumulative_title() -> str:
    return "ALL GAMES  --  cumulative leaderboard across every series played:"
