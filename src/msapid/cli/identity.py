from msapid.cli import compare, program
from msapid.engine.structures.scoring import IdentityScoring


parser = program.subparsers.add_parser(
    "identity",
    help="Output percent identities."
)


def run(args):
    compare.run_asynchronously(args, IdentityScoring())

parser.set_defaults(func=run)
