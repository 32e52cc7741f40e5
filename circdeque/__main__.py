#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~
#  MIT License
#
#  Copyright (c) 2025 Nathan Juraj Michlo
#
#  Permission is hereby granted, free of charge, to any person obtaining a copy
#  of this software and associated documentation files (the "Software"), to deal
#  in the Software without restriction, including without limitation the rights
#  to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
#  copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
#  The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.
#
#  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
#  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
#  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
#  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
#  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
#  OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
#  SOFTWARE.
#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~


def _make_parser():
    import argparse
    from circdeque.check import _make_parser_check, _run_check
    from circdeque.bench import _make_parser_bench, _run_bench

    YLW = "\033[93m"
    RST = "\033[0m"

    # subcommands
    cli = argparse.ArgumentParser(prog="circdeque")
    parsers = cli.add_subparsers(dest="command")
    parsers.required = True

    # subcommand: check -- add args from check.py
    parser_check = parsers.add_parser("check")
    parser_check.set_defaults(
        _run_fn_=_run_check, _run_msg_=f"{YLW}checking...{RST}"
    )
    _make_parser_check(parser_check)

    # subcommand: bench -- add args from bench.py
    parser_bench = parsers.add_parser("bench")
    parser_bench.set_defaults(
        _run_fn_=_run_bench, _run_msg_=f"{YLW}benchmarking...{RST}"
    )
    _make_parser_bench(parser_bench)

    return cli


if __name__ == "__main__":
    import logging

    # initialise logging
    logging.basicConfig(level=logging.INFO)

    # run the specified subcommand!
    args = _make_parser().parse_args()
    print(f"{args._run_msg_}")
    args._run_fn_(args)
