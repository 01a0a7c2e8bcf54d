import argparse
import logging
from pathlib import Path

from markov.metrics import mean_branching_entropy, n_states, n_transitions, save_dot, to_dot, to_frame
from markov.text import TextChain
from markov.utils.logging import configure_logging
from markov.utils.rng import seeded_rng

LOGGER = logging.getLogger(__name__)


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="markov",
        description="Train a word-level Markov chain and print generated sentences.",
    )

    parser.add_argument("--train", nargs="+", type=Path, default=[], help="Text files, one sentence per line.")
    parser.add_argument("--load", type=Path, default=None, help="Load a saved chain (JSON) before training.")
    parser.add_argument("--save", type=Path, default=None, help="Write the trained chain as JSON.")

    parser.add_argument("-n", "--count", type=int, default=1, help="Number of sentences to print.")
    parser.add_argument("--start", type=str, default=None, help="Start every sentence with this word.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-length", type=int, default=None, help="Cap on words per sentence.")

    parser.add_argument("--dot", type=Path, default=None, help="Write a Graphviz DOT file of the chain.")
    parser.add_argument("--edges", type=Path, default=None, help="Write the transition edge list as CSV.")

    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = _parse_args(argv)
    configure_logging(args.log_level)

    if not args.train and args.load is None:
        raise ValueError("Pass at least one of --train or --load.")
    if args.count < 0:
        raise ValueError(f"--count must be >= 0, got {args.count}.")
    if args.max_length is not None and args.max_length < 1:
        raise ValueError(f"--max-length must be >= 1, got {args.max_length}.")

    if args.load is not None:
        chain = TextChain.load(args.load, max_length=args.max_length)
        LOGGER.info("Loaded %s | states=%d", args.load, n_states(chain))
    else:
        chain = TextChain(max_length=args.max_length)

    for i, path in enumerate(args.train, start=1):
        chain.feed_file(path)
        LOGGER.info("Trained %d/%d | %s | states=%d", i, len(args.train), path, n_states(chain))

    LOGGER.info(
        "Chain ready | states=%d | transitions=%d | mean branching entropy=%.3f bits",
        n_states(chain),
        n_transitions(chain),
        mean_branching_entropy(chain, log_base=2.0),
    )

    if args.save is not None:
        chain.save(args.save)
        LOGGER.info("Wrote %s", args.save)
    if args.dot is not None:
        save_dot(args.dot, to_dot(chain, label=f"{n_states(chain)} states"))
        LOGGER.info("Wrote %s", args.dot)
    if args.edges is not None:
        args.edges.parent.mkdir(parents=True, exist_ok=True)
        to_frame(chain).to_csv(args.edges, index=False)
        LOGGER.info("Wrote %s", args.edges)

    if chain.is_empty():
        LOGGER.warning("Chain is empty; nothing to generate.")
        return

    rng = seeded_rng(args.seed) if args.seed is not None else chain.rng
    for _ in range(args.count):
        if args.start is not None:
            sentence = chain.generate_str_from_token(args.start, rng)
        else:
            sentence = chain.generate_str(rng)
        print(sentence)


if __name__ == "__main__":
    main()
