"""Reading of the semicolon-separated spreadsheets into a Controle."""

import os
import re

from .casal import Casal
from .dates import DATE_FORMAT_PT_BR_SHORT, parse_date
from .entities import (
    Casamento,
    Compra,
    Festa,
    Lar,
    Loja,
    Parcela,
    PessoaFisica,
    PessoaJuridica,
    Tarefa,
)
from .numfmt import parse_double
from .textutils import trim
from .tokenizer import Tokenizer

SEPARATOR = ";"
DATA_INICIO_COMPRAS = "16/10/2004"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text):
    """Read the leading integer of *text*; raise ValueError when there is none."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _take(tokens):
    """Next field, or an empty string once the line is used up."""
    return tokens.next() if tokens.has_next() else ""


def _take_many(tokens, count):
    return [_take(tokens) for _ in range(count)]


def _records(pasta, nome):
    """Yield a tokenizer for each line of the spreadsheet, echoing the line.

    A spreadsheet that cannot be opened yields nothing.
    """
    try:
        arquivo = open(os.fspath(pasta) + nome, encoding="utf-8")
    except OSError:
        return
    with arquivo:
        for linha in arquivo:
            linha = linha.rstrip("\n")
            print(linha)
            yield Tokenizer(linha, SEPARATOR)


def _casal_de(controle, id1, id2):
    """The couple of the two natural persons, created if needed; None if one is unknown."""
    pessoa1 = controle.get_pessoa_fisica(id1)
    pessoa2 = controle.get_pessoa_fisica(id2)
    if pessoa1 is None or pessoa2 is None:
        return None
    casal = controle.get_casal(id1, id2)
    if casal is None:
        casal = Casal(pessoa1, pessoa2)
        controle.add(id1, casal)
    return casal


def le_pessoas(pasta, controle):
    """Read ``pessoas.csv``: natural persons (F), companies (J) and stores (L)."""
    for tokens in _records(pasta, "pessoas.csv"):
        while tokens.has_next():
            ident, tipo, nome, telefone, endereco = _take_many(tokens, 5)
            if tipo == "F":
                cpf = _take(tokens)
                nascimento = parse_date(_take(tokens), DATE_FORMAT_PT_BR_SHORT)
                poupanca, salario, gastos = (parse_double(_take(tokens)) for _ in range(3))
                controle.add(
                    ident,
                    PessoaFisica(
                        ident, nome, telefone, endereco, nascimento, cpf, poupanca, salario, gastos
                    ),
                )
            else:
                cnpj = _take(tokens)
                if tipo == "J":
                    controle.add(ident, PessoaJuridica(ident, nome, telefone, endereco, cnpj))
                elif tipo == "L":
                    controle.add(ident, Loja(ident, nome, telefone, endereco, cnpj))


def le_lares(pasta, controle):
    """Read ``lares.csv``, giving each couple its home.

    A line whose home id is shorter than three characters ends that line's
    reading; lines naming an unknown person are skipped.
    """
    for tokens in _records(pasta, "lares.csv"):
        while tokens.has_next():
            id_lar = _take(tokens)
            if len(id_lar) < 3:
                break
            id_pessoa1, id_pessoa2, rua = _take_many(tokens, 3)
            numero = _parse_int(_take(tokens))
            complemento = _take(tokens)
            casal = _casal_de(controle, id_pessoa1, id_pessoa2)
            if casal is not None:
                lar = Lar(rua, complemento, numero)
                controle.add(id_lar, lar)
                casal.lar = lar


def le_casamentos(pasta, controle):
    """Read ``casamentos.csv``, giving each couple its wedding.

    Lines naming an unknown person are skipped.
    """
    for tokens in _records(pasta, "casamentos.csv"):
        while tokens.has_next():
            id_casamento, id_pessoa1, id_pessoa2 = _take_many(tokens, 3)
            data = parse_date(_take(tokens), DATE_FORMAT_PT_BR_SHORT)
            hora, local = _take_many(tokens, 2)
            casal = _casal_de(controle, id_pessoa1, id_pessoa2)
            if casal is not None:
                casamento = Casamento(local, data, hora)
                controle.add(id_casamento, casamento)
                casal.casamento = casamento


def le_festas(pasta, controle):
    """Read ``festas.csv``; every field after the guest count is a guest's name.

    Raises KeyError when a party refers to an unknown wedding.
    """
    for tokens in _records(pasta, "festas.csv"):
        while tokens.has_next():
            id_festa, id_casamento, local = _take_many(tokens, 3)
            data = parse_date(_take(tokens), DATE_FORMAT_PT_BR_SHORT)
            hora = _take(tokens)
            preco = parse_double(_take(tokens))
            num_parcelas = _parse_int(_take(tokens))
            _parse_int(_take(tokens))  # guest count; the names that follow are what counts
            parcela = Parcela(num_parcelas, preco, data)
            convidados = [trim(convidado) for convidado in tokens]
            festa = Festa(local, preco, data, hora, convidados, parcela)
            casamento = controle.get_casamento(id_casamento)
            if casamento is None:
                raise KeyError(f"unknown wedding {id_casamento!r}")
            casamento.festa = festa
            controle.add(id_festa, festa)


def _prestador(controle, ident):
    for busca in (controle.get_pessoa_fisica, controle.get_pessoa_juridica, controle.get_loja):
        pessoa = busca(ident)
        if pessoa is not None:
            return pessoa
    return None


def le_tarefas(pasta, controle):
    """Read ``tarefas.csv``, attaching each task to its home.

    Raises KeyError when a task refers to an unknown home.
    """
    for tokens in _records(pasta, "tarefas.csv"):
        while tokens.has_next():
            id_tarefa, id_lar, id_prestador = _take_many(tokens, 3)
            data = parse_date(_take(tokens), DATE_FORMAT_PT_BR_SHORT)
            prazo = _parse_int(_take(tokens))
            valor = parse_double(_take(tokens))
            num_parcelas = _parse_int(_take(tokens))
            parcela = Parcela(num_parcelas, valor, data)
            tarefa = Tarefa(
                id_tarefa, valor, data, prazo, _prestador(controle, id_prestador), parcela
            )
            lar = controle.get_lar(id_lar)
            if lar is None:
                raise KeyError(f"unknown home {id_lar!r}")
            lar.add_tarefa(tarefa)
            controle.add(id_tarefa, tarefa)


def le_compras(pasta, controle):
    """Read ``compras.csv``, attaching each purchase to its task.

    Raises KeyError when a purchase refers to an unknown task.
    """
    for tokens in _records(pasta, "compras.csv"):
        while tokens.has_next():
            id_compra, id_tarefa, id_loja, nome = _take_many(tokens, 4)
            quantidade = _parse_int(_take(tokens))
            preco = parse_double(_take(tokens))
            num_parcelas = _parse_int(_take(tokens))
            parcela = Parcela(
                num_parcelas, preco, parse_date(DATA_INICIO_COMPRAS, DATE_FORMAT_PT_BR_SHORT)
            )
            compra = Compra(nome, quantidade, preco, controle.get_loja(id_loja), parcela)
            tarefa = controle.get_tarefa(id_tarefa)
            if tarefa is None:
                raise KeyError(f"unknown task {id_tarefa!r}")
            tarefa.add_compra(compra)
            controle.add(id_compra, compra)