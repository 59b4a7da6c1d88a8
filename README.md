# casamentos

Reads a set of semicolon-separated wedding-planning spreadsheets. It then
writes a report of each couple's total spending and the number of parties
that both partners were invited to.

## Installation

    pip install .

## Usage

    casamentos path/to/data/

The one argument is a prefix. It is joined directly to the file names, so
include the trailing slash. The command reads these files from it, in this
order:

- `pessoas.csv`: people. Type `F` is a natural person, `J` is a company and
  `L` is a shop.
- `lares.csv`: homes. Each home is linked to a couple by the ids of its two
  partners.
- `casamentos.csv`: weddings. Each wedding is linked to a couple in the same way.
- `festas.csv`: parties. Each party is linked to a wedding. Every field after
  the guest count is a guest's name.
- `tarefas.csv`: tasks for a home. Each task names the person, company or
  shop that does it.
- `compras.csv`: purchases for each task, made from a shop.

Dates use the `dd/mm/yyyy` form. Decimal numbers use a comma as the decimal
separator, for example `1500,50`.

A spreadsheet that cannot be opened is skipped.

The command prints the following to standard output:

- each line as it is read;
- the two names of each couple when the couple is formed;
- a description of every couple.

It then writes `saida/3-estatisticas-casais.csv` under the same prefix. The
`saida` directory must already exist. If the file cannot be created, no
report is written.

Each line of the report looks like this:

    Ana;Bruno;R$ 12345,67;2

The fields are:

- the two partners' names, in alphabetical order;
- the couple's total spending;
- the number of parties to which both partners were invited.

The total spending is the price of the couple's party plus the cost of every
task in their home. A task's cost is the provider's price plus the unit price
times the quantity of each of its purchases.

Lines are sorted by spending, highest first. Couples with the same spending
are sorted by the first partner's name.

### Errors

The reading stops with an error in these cases:

- A malformed date or integer raises `ValueError`.
- A party that names an unknown wedding raises `KeyError`.
- A task that names an unknown home raises `KeyError`.
- A purchase that names an unknown task raises `KeyError`.

Home and wedding lines that name an unknown person are skipped. A home line
whose id is shorter than three characters ends the reading of that line.

## Library use

    from casamentos.controle import Controle
    from casamentos.leitura import le_pessoas, le_lares, le_casamentos
    from casamentos.relatorio import ordena_casais

    controle = Controle()
    le_pessoas("data/", controle)
    le_lares("data/", controle)
    le_casamentos("data/", controle)
    for casal in ordena_casais(controle):
        print(casal.report_line())

The modules are:

- `casamentos.controle`: `Controle` is the registry of everything read, by id.
  Use `add` to register an item and `get_*` to look one up.
- `casamentos.leitura`: the readers. They are `le_pessoas`, `le_lares`,
  `le_casamentos`, `le_festas`, `le_tarefas` and `le_compras`.
- `casamentos.relatorio`:
  - `ordena_casais` works out each couple's figures and returns the couples
    in report order.
  - `gera_relatorio_casais` writes the report file.
- `casamentos.casal` and `casamentos.entities`: the data classes, such as
  couples, people, homes, tasks, purchases, parties and weddings.
- `casamentos.dates`, `casamentos.numfmt`, `casamentos.textutils` and
  `casamentos.tokenizer`: helpers for dates, comma-decimal numbers, trimming
  and field splitting.

## What it does not do

Couple statistics are the only report. Instalment plans (`Parcela`) are
recorded for parties, tasks and purchases. They are not used in any
calculation or output.

## Running the tests

    pip install .[test]
    pytest