"""The couples statistics report."""

import os

from .casal import Casal

REPORT_NAME = "saida/3-estatisticas-casais.csv"


def ordena_casais(controle):
    """Work out every couple's figures and return them in report order."""
    casais = []
    for casal in controle.casais.values():
        casal.processa_gasto_total()
        casal.processa_casamentos_conjuntos(controle.festas)
        casais.append(casal)
    casais.sort(key=Casal.sort_key)
    return casais


def gera_relatorio_casais(pasta, controle):
    """Write the couples report into the ``saida`` folder under *pasta*.

    *pasta* is used as a prefix, so it should end with a path separator.
    When the report file cannot be created nothing is done and an empty
    list is returned; otherwise the couples in report order are returned.
    """
    try:
        arquivo = open(os.fspath(pasta) + REPORT_NAME, "w", encoding="utf-8")
    except OSError:
        return []
    with arquivo:
        casais = ordena_casais(controle)
        arquivo.writelines(f"{casal.report_line()}\n" for casal in casais)
    return casais