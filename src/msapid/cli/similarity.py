from msapid.cli import compare, program
from msapid.engine import config
from msapid.engine.structures.scoring import MinScoreThreshold, SimilarityScoring, SubstitutionMatrix


parser = program.subparsers.add_parser(
    "similarity",
    help="Output percent similarities."
)

parser.add_argument(
    "--blosum", "-b",
    dest="blosum",
    required=False,
    default=SubstitutionMatrix.from_name(config.DEFAULT_SUBSTITUTION_MATRIX),
    type=SubstitutionMatrix.from_name,
    choices=list(SubstitutionMatrix),
    help="Which scoring matrix to use."
)

parser.add_argument(
    "--min-score", "-m",
    dest="min_score",
    required=False,
    default=MinScoreThreshold(config.DEFAULT_MIN_SCORE),
    type=MinScoreThreshold.from_value,
    choices=list(MinScoreThreshold),
    help="Minimum substitution score to count as 'similar'."
)


def run(args):
    compare.run_asynchronously(args, SimilarityScoring(matrix=args.blosum, min_score=args.min_score))

parser.set_defaults(func=run)
