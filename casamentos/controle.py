"""Registry of everything read from the spreadsheets, by id."""

from .casal import Casal
from .entities import (
    Casamento,
    Compra,
    Festa,
    Lar,
    Loja,
    PessoaFisica,
    PessoaJuridica,
    Tarefa,
)


class Controle:
    """Holds people, stores, parties, couples, weddings, homes, tasks and purchases.

    Adding an id that is already registered for the same kind keeps the first item.
    """

    def __init__(self):
        self.pessoas_fisicas = {}
        self.pessoas_juridicas = {}
        self.lojas = {}
        self.festas = {}
        self.casais = {}
        self.casamentos = {}
        self.lares = {}
        self.tarefas = {}
        self.compras = {}

    def _registry_for(self, item):
        # Loja comes before PessoaJuridica: a store is a company too.
        registries = (
            (Loja, self.lojas),
            (PessoaJuridica, self.pessoas_juridicas),
            (PessoaFisica, self.pessoas_fisicas),
            (Casal, self.casais),
            (Casamento, self.casamentos),
            (Lar, self.lares),
            (Festa, self.festas),
            (Tarefa, self.tarefas),
            (Compra, self.compras),
        )
        for kind, registry in registries:
            if isinstance(item, kind):
                return registry
        raise TypeError(f"cannot register {type(item).__name__}")

    def add(self, ident, item):
        """Register *item* under *ident* in the registry for its kind."""
        self._registry_for(item).setdefault(ident, item)

    def get_casal(self, id1, id2):
        """Find a couple registered under either member's id."""
        casal = self.casais.get(id1)
        if casal is None:
            casal = self.casais.get(id2)
        return casal

    def get_pessoa_fisica(self, ident):
        return self.pessoas_fisicas.get(ident)

    def get_pessoa_juridica(self, ident):
        return self.pessoas_juridicas.get(ident)

    def get_loja(self, ident):
        return self.lojas.get(ident)

    def get_festa(self, ident):
        return self.festas.get(ident)

    def get_casamento(self, ident):
        return self.casamentos.get(ident)

    def get_lar(self, ident):
        return self.lares.get(ident)

    def get_tarefa(self, ident):
        return self.tarefas.get(ident)

    def get_compra(self, ident):
        return self.compras.get(ident)

    def describe_casais(self):
        """Description of every registered couple, one after another."""
        return "".join(casal.describe() for casal in self.casais.values())