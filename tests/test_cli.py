import os

import pytest

from casamentos.cli import main


def _write(folder, name, rows):
    (folder / name).write_text("\n".join(rows) + "\n", encoding="utf-8")


@pytest.fixture
def pasta(tmp_path):
    _write(
        tmp_path,
        "pessoas.csv",
        [
            "P01;F;Bruno;tel-bruno;Rua B;cpf-bruno;02/03/1990;1000,00;3000,00;500,00",
            "P02;F;Ana;tel-ana;Rua A;cpf-ana;04/05/1992;200,00;2500,00;400,00",
        ],
    )
    _write(tmp_path, "casamentos.csv", ["C01;P01;P02;10/05/2025;18:00;Igreja"])
    _write(tmp_path, "festas.csv", ["F01;C01;Salao;10/05/2025;20:00;1000,00;2;2;Ana;Bruno"])
    return tmp_path


def test_main_writes_report(pasta):
    (pasta / "saida").mkdir()
    assert main([str(pasta) + os.sep]) == 0
    report = (pasta / "saida" / "3-estatisticas-casais.csv").read_text(encoding="utf-8")
    assert report == "Ana;Bruno;R$ 1000,00;1\n"


def test_main_describes_couples(pasta, capsys):
    (pasta / "saida").mkdir()
    main([str(pasta) + os.sep])
    out = capsys.readouterr().out
    assert "Casal, formado pelos seguintes sujeitos:\n" in out
    assert "Tem casamento\nLocal: Igreja\n" in out


def test_main_without_output_folder_writes_nothing(pasta):
    assert main([str(pasta) + os.sep]) == 0
    assert not (pasta / "saida").exists()


def test_main_requires_folder():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2