#!/usr/bin/env python3

import argparse as arg
import logging
import sys
from arith.frontend.errors import ArithError
from arith.driver import run_stages, format_result

logger = logging.getLogger('arithc')

def calculate(expression: str, args) -> str:
    """Runs the whole pipeline and returns everything to print.
    Nothing is printed until every stage has succeeded.
    """
    stages = run_stages(expression)
    output = ""

    if args.tokens:
        output += "".join(f"{tok}\n" for tok in stages.tokens)
    if args.ast:
        output += str(stages.tree)

    output += format_result(expression, stages.result)
    return output

def main(argv=None) -> int:
    parser = arg.ArgumentParser(
        prog='arithc',
        description='Evaluates an integer arithmetic expression',
        epilog='Quote the expression if it contains spaces')

    parser.add_argument('expression')
    parser.add_argument('-t', '--tokens', dest='tokens', action='store_true', default=False)
    parser.add_argument('-a', '--ast', dest='ast', action='store_true', default=False)
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true', default=False)
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(message)s')

    try:
        output = calculate(args.expression, args)
    except ArithError as e:
        logger.debug('failed on %r: %s', args.expression, type(e).__name__)
        print(f'error: {e}', file=sys.stderr)
        return 1
    print(output)
    return 0

if __name__ == '__main__':
    sys.exit(main())
