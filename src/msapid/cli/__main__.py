import sys

from msapid.cli.program import run

sys.exit(run())
