"""Command line entry: read the spreadsheets of a folder and write the couples report."""

import argparse

from .controle import Controle
from .leitura import (
    le_casamentos,
    le_compras,
    le_festas,
    le_lares,
    le_pessoas,
    le_tarefas,
)
from .relatorio import gera_relatorio_casais


def main(argv=None):
    """Read every spreadsheet in the folder, describe the couples and write the report."""
    parser = argparse.ArgumentParser(
        prog="casamentos",
        description="Read the wedding spreadsheets of a folder and report on the couples.",
    )
    parser.add_argument(
        "pasta", help="folder holding the spreadsheets, ending with a path separator"
    )
    args = parser.parse_args(argv)

    controle = Controle()
    for leitor in (le_pessoas, le_lares, le_casamentos, le_festas, le_tarefas, le_compras):
        leitor(args.pasta, controle)

    print(controle.describe_casais(), end="")
    gera_relatorio_casais(args.pasta, controle)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())