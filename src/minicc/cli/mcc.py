"""
mcc - minicc Compiler Command-Line Interface
============================================

Runs one stage of the minicc compiler on a C source file.

Usage Examples
--------------
Lexical analysis (prints the token list):
    $ mcc --lex hello.c

Parsing and code generation (not implemented yet, acknowledged only):
    $ mcc --parse hello.c
    $ mcc --codegen hello.c

Assembly file (creates an empty hello.s):
    $ mcc -s hello.c

Full pipeline:
    $ mcc hello.c -o out.s
"""

import logging
from pathlib import Path
from typing import Optional

import click

from minicc import __version__
from minicc.cli.errors import handle_cli_exception
from minicc.frontend.compiler import (
    CompilerOptions,
    MiniCCompiler,
    Stage,
    is_c_source,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def validate_source_path(ctx: click.Context, param: click.Parameter, value: Path) -> Path:
    """Reject input files that do not end in .c."""
    if not is_c_source(value):
        raise click.BadParameter(
            f"'{value}' must have a .c extension.",
            ctx=ctx,
            param=param,
        )
    return value


def select_stage(**modes: bool) -> Optional[Stage]:
    """Map the mode flags to a single Stage, or None for the full pipeline."""
    chosen = [name for name, given in modes.items() if given]
    if len(chosen) > 1:
        flags = ", ".join(f"--{name}" for name in chosen)
        raise click.UsageError(f"Only one mode may be given, got: {flags}")
    if not chosen:
        return None
    return Stage(chosen[0])


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
    callback=validate_source_path,
)
@click.option("--lex", is_flag=True,
              help="Perform lexical analysis and print the tokens")
@click.option("--parse", is_flag=True,
              help="Perform parsing (not implemented yet)")
@click.option("--codegen", is_flag=True,
              help="Perform code generation (not implemented yet)")
@click.option("-s", "-S", "--assembly", is_flag=True,
              help="Generate an assembly file")
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output assembly file (default: input with .s extension)",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Source file text encoding",
)
@click.option(
    "--allow-unterminated-comments",
    is_flag=True,
    help="Accept a /* comment that runs to end of file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mcc")
def main(
    input_file: Path,
    lex: bool,
    parse: bool,
    codegen: bool,
    assembly: bool,
    output: Optional[Path],
    encoding: str,
    allow_unterminated_comments: bool,
    verbose: bool,
) -> None:
    """
    Compile a minicc C source file.

    INPUT_FILE is the C source file (.c) to process.

    \b
    Modes:
        --lex        Tokenize and print the token list
        --parse      Acknowledge only (parser not implemented)
        --codegen    Acknowledge only (code generator not implemented)
        -s, -S       Create an empty assembly file
        (none)       Tokenize, then write the assembly file
    """
    setup_logging(verbose)
    selected = select_stage(lex=lex, parse=parse, codegen=codegen, assembly=assembly)

    options = CompilerOptions(
        encoding=encoding,
        allow_unterminated_comments=allow_unterminated_comments,
        output=output,
    )
    logger.debug(f"Compiler options: {options}")
    compiler = MiniCCompiler(options)

    try:
        if selected is Stage.LEX:
            click.echo(f"Performing lexical analysis on {input_file}")
            result = compiler.run(selected, input_file)
            for token in result.tokens:
                click.echo(repr(token))

        elif selected is Stage.PARSE:
            click.echo(f"Performing parsing on {input_file}")
            compiler.run(selected, input_file)

        elif selected is Stage.CODEGEN:
            click.echo(f"Performing code generation on {input_file}")
            compiler.run(selected, input_file)

        elif selected is Stage.ASSEMBLY:
            result = compiler.run(selected, input_file)
            click.echo(f"Generated assembly file: {result.assembly_path}")

        else:
            result = compiler.run(None, input_file)
            if verbose:
                click.echo(f"Tokenized: {result.token_count} tokens")
            click.echo(f"Compiled {input_file} -> {result.assembly_path}")

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
