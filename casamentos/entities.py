"""People, stores, tasks, purchases, homes, parties and weddings."""

from dataclasses import dataclass, field

from .dates import DATE_FORMAT_PT_BR_SHORT, format_date


@dataclass
class Pessoa:
    """Anyone known to the system by id."""

    id: str
    nome: str
    telefone: str
    endereco: str


@dataclass
class PessoaFisica(Pessoa):
    """A natural person, with birth date and finances."""

    data_nascimento: int
    cpf: str
    poupanca: float
    salario: float
    gastos: float

    def describe(self):
        return (
            f"Nome: {self.nome}\nEndereço: {self.endereco}\nTelefone: {self.telefone}\n"
            f"CPF: {self.cpf}\nGasto Mensal: {self.gastos:f}\n"
        )


@dataclass
class PessoaJuridica(Pessoa):
    """A company."""

    cnpj: str

    def describe(self):
        return (
            f"Nome: {self.nome}\nEndereço: {self.endereco}\nTelefone: {self.telefone}\n"
            f"CNPJ: {self.cnpj}\n"
        )


@dataclass
class Loja(PessoaJuridica):
    """A company that sells goods."""


@dataclass
class Parcela:
    """An instalment plan: number of instalments, value and start date."""

    num_inicial: int
    valor: float
    data_inicio: int
    num_atual: int = field(init=False)

    def __post_init__(self):
        self.num_atual = self.num_inicial


@dataclass
class Compra:
    """A purchase of some units of a product at a store."""

    nome_produto: str
    quantidade: int
    preco_unidade: float
    loja: Loja | None
    parcela: Parcela

    def preco(self):
        """Total price: unit price times quantity."""
        return self.preco_unidade * self.quantidade

    def describe(self):
        return f"Compra: {self.nome_produto}\n"


@dataclass
class Tarefa:
    """A task for a home, done by a provider, with its purchases."""

    id: str
    preco: float
    data: int
    prazo: int
    prestador: Pessoa | None
    parcela: Parcela
    compras: list = field(default_factory=list)

    def add_compra(self, compra):
        self.compras.append(compra)

    def preco_total(self):
        """Provider's price plus the price of every purchase."""
        return self.preco + sum(compra.preco() for compra in self.compras)

    def describe(self):
        lines = [f"Tarefa: {self.preco:f} {self.prazo}\n"]
        lines.extend(compra.describe() for compra in self.compras)
        return "".join(lines)


@dataclass
class Lar:
    """A couple's home and the tasks done in it."""

    rua: str
    complemento: str
    numero: int
    tarefas: list = field(default_factory=list)

    def add_tarefa(self, tarefa):
        self.tarefas.append(tarefa)

    def preco_total_tarefas(self):
        return sum(tarefa.preco_total() for tarefa in self.tarefas)

    def describe(self):
        return "Possui lar\n" + "".join(tarefa.describe() for tarefa in self.tarefas)


@dataclass
class Festa:
    """A wedding party with its guests."""

    local: str
    preco_pago: float
    data: int
    horario: str
    lista_convidados: list
    parcela: Parcela

    def describe(self):
        text = (
            f"Local: {self.local}, preco: {self.preco_pago:f}, "
            f"data: {format_date(self.data, DATE_FORMAT_PT_BR_SHORT)}\n"
        )
        if self.lista_convidados:
            text += "Convidados:\n" + "".join(f"{nome}\n" for nome in self.lista_convidados)
        return text


@dataclass
class Casamento:
    """A wedding ceremony, possibly followed by a party."""

    local: str
    data: int
    hora: str
    festa: Festa | None = None

    def describe(self):
        text = (
            f"Tem casamento\nLocal: {self.local}\n"
            f"Data: {format_date(self.data, DATE_FORMAT_PT_BR_SHORT)}\nHora: {self.hora}\n"
        )
        if self.festa is not None:
            text += self.festa.describe()
        return text