# ==================================================
# examples/simple.py
# ==================================================
import argparse, logging
from perfect_hash_store import FullMap, Grid, Set, UnorderedPairs
from perfect_hash_store.logging_config import setup_logging

GREETING = [((0, 3, 7), "Hello "), ((4, 19, 13), "lovely"), ((9, 8, 29), "World!")]
PROBES   = [(0, 3, 7), (2, 15, 2), (9, 8, 29), (7, 4, 23)]

def run_map(dims):
    grid  = FullMap(Grid(*dims), default_factory=str)
    for key, word in GREETING:
        grid.insert(key, word)
    return "".join(grid.get(k) for k in PROBES)

def run_set(n, pairs):
    edges = Set(UnorderedPairs(n))
    for u, v in pairs:
        edges.insert((u, v))
    return list(edges)

def main(argv=None):
    p = argparse.ArgumentParser(description="perfect_hash_store demo")
    p.add_argument("--dims", type=int, nargs=3, default=[10, 20, 30],
                   metavar=("W", "H", "D"), help="grid dimensions for the map demo")
    p.add_argument("--pairs", type=int, default=10, help="domain size n of the set demo")
    p.add_argument("--edge", type=int, nargs=2, action="append", default=None,
                   metavar=("U", "V"), help="pair to put into the set (repeatable)")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    print(run_map(args.dims))
    print(run_set(args.pairs, args.edge or [(3, 7)]))

if __name__ == "__main__":
    main()
