import argparse

from loguru import logger

from adaptive_rps.config import configure_logging, load_config
from adaptive_rps.difficulty import DifficultyTier, parse_tier
from adaptive_rps.game_logic import InvalidMoveError
from adaptive_rps.match import Match, MatchOverError
from adaptive_rps.opponent import AdaptiveOpponent
from adaptive_rps.simulate import cycle_human, random_human, simulate

TIER_KEYS = {"1": DifficultyTier.EASY, "2": DifficultyTier.MEDIUM, "3": DifficultyTier.HARD}
HELP = "r/p/s = play, 1/2/3 = easy/medium/hard, n = new match, q = quit"


def positive_int(value) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="adaptive-rps", description="Rock-Paper-Scissors against an adaptive opponent")
    p.add_argument("--config", default=None, help="path to a config.yaml")
    p.add_argument("--difficulty", type=parse_tier, default=None, help="easy | medium | hard")
    p.add_argument("--rounds", type=positive_int, default=None, help="best of N")
    p.add_argument("--simulate", type=positive_int, metavar="N", default=0,
                   help="play N scripted rounds per strategy and print the rates instead")
    return p.parse_args(argv)


def run_simulation(opponent: AdaptiveOpponent, rounds: int, write=print):
    for name, human in (("random", random_human(seed=7)), ("cycle", cycle_human())):
        opponent.reset_match()
        report = simulate(opponent, human, rounds)
        write(
            f"{name:>6} | {opponent.get_difficulty().value:>6} | ai={report.ai_win_rate:.3f} "
            f"human={report.human_win_rate:.3f} tie={report.tie_rate:.3f} "
            f"win_intent={report.win_intent_rate:.3f}"
        )


def play(match: Match, read=input, write=print):
    opponent = match.opponent
    write(HELP)
    while True:
        try:
            key = read(f"[{opponent.get_difficulty().value}] round {match.rounds_played + 1}> ").strip().lower()
        except EOFError:
            break
        if key == "q":
            break
        if key in TIER_KEYS:
            opponent.set_difficulty(TIER_KEYS[key])
            write(f"Difficulty: {opponent.get_difficulty().value}")
            continue
        if key == "n":
            match.reset()
            write("New match")
            continue

        try:
            result = match.play_round(key)
        except InvalidMoveError:
            write(HELP)
            continue
        except MatchOverError:
            write("Match is over. Press n for a new match.")
            continue

        write(f"You: {result.player.value} | Computer: {result.ai.value} -> {result.result} "
              f"(proof {result.proof})")
        write(f"Score {match.wins}-{match.losses} ties {match.ties}")
        if match.is_over:
            write(f"Game over! Winner: {match.winner}. Press n for a new match.")


def main(argv=None):
    args = parse_args(argv)
    cfg = load_config(args.config)
    configure_logging(cfg.logging.level)

    opponent = AdaptiveOpponent.from_config(cfg.ai)
    if args.difficulty is not None:
        opponent.set_difficulty(args.difficulty)
    total_rounds = args.rounds if args.rounds is not None else cfg.match.total_rounds
    logger.info(f"Starting best of {total_rounds} at {opponent.get_difficulty().value}")

    if args.simulate:
        run_simulation(opponent, args.simulate)
        return
    play(Match(opponent, total_rounds))


if __name__ == "__main__":
    main()
