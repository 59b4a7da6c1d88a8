"""A married couple and the figures the couples report is built from."""

from collections.abc import Mapping

from .numfmt import format_currency


class Casal:
    """Two people who share a home and/or a wedding.

    The two people are kept ordered by name, so ``pessoa1`` always holds the
    name that sorts first.
    """

    def __init__(self, pessoa1, pessoa2):
        print(f"{pessoa1.nome}/{pessoa2.nome}")
        if pessoa1.nome < pessoa2.nome:
            self.pessoa1, self.pessoa2 = pessoa1, pessoa2
        else:
            self.pessoa1, self.pessoa2 = pessoa2, pessoa1
        self.casamento = None
        self.lar = None
        self.gasto_total = 0.0
        self.casamentos_conjuntos = 0

    def __repr__(self):
        return f"Casal({self.pessoa1.nome!r}, {self.pessoa2.nome!r})"

    def processa_gasto_total(self):
        """Add the party's price and the home's task costs to the total spent."""
        if self.casamento is not None and self.casamento.festa is not None:
            self.gasto_total += self.casamento.festa.preco_pago
        if self.lar is not None:
            self.gasto_total += self.lar.preco_total_tarefas()
        print(f"gasto total: {self.gasto_total:g}")
        return self.gasto_total

    def processa_casamentos_conjuntos(self, festas):
        """Count the parties to which both members of the couple were invited.

        *festas* is a mapping of parties by id or any iterable of parties.
        """
        if isinstance(festas, Mapping):
            festas = festas.values()
        nome1, nome2 = self.pessoa1.nome, self.pessoa2.nome
        for festa in festas:
            convidados = festa.lista_convidados
            if nome1 in convidados and nome2 in convidados:
                self.casamentos_conjuntos += 1
        print(f"casamentos conjuntos: {self.casamentos_conjuntos}")
        return self.casamentos_conjuntos

    def report_line(self):
        """The couple's line in the statistics report."""
        return (
            f"{self.pessoa1.nome};{self.pessoa2.nome};"
            f"R$ {format_currency(self.gasto_total)};{self.casamentos_conjuntos}"
        )

    def __str__(self):
        return self.report_line()

    def sort_key(self):
        """Order by total spent, highest first, then by first member's name."""
        return (-self.gasto_total, self.pessoa1.nome)

    def describe(self):
        parts = [
            "Casal, formado pelos seguintes sujeitos:\n",
            self.pessoa1.describe(),
            self.pessoa2.describe(),
        ]
        if self.lar is not None:
            parts.append(self.lar.describe())
        if self.casamento is not None:
            parts.append(self.casamento.describe())
        return "".join(parts)