import builtins

import pytest

import cli
import data_loader as dl
from inventory import Inventory
from models import Component


@pytest.fixture
def answers(monkeypatch):
    """Feeds scripted answers to input(); EOF once they run out."""
    def install(*lines):
        it = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr(builtins, "input", fake_input)

    return install


class TestRender:
    def test_empty(self):
        assert "[Sem componentes cadastrados]" in cli.render_components([])

    def test_rows(self):
        out = cli.render_components([Component("antena", "comunicacao", 9), Component("chip", "eletronico", 10)])
        assert "total: 2" in out
        assert "|  0 | antena" in out
        assert "|  1 | chip" in out
        assert out.rstrip().endswith("-" * 57)


class TestMenu:
    def test_register_sort_and_search(self, answers, capsys):
        answers("1", "2", "beta", "x", "3", "alfa", "y", "12", "3", "6", "alfa", "0")
        inv = Inventory()
        cli.run_menu(inv)
        out = capsys.readouterr().out
        assert "Cadastro concluido com 2 componentes." in out
        assert "Comparacoes realizadas: 1" in out
        assert "Componente encontrado no indice 0:" in out
        assert "Prioridade: 10" in out
        assert inv.sorted_by_name

    def test_invalid_option_reprompts(self, answers, capsys):
        answers("abc", "42", "0")
        cli.run_menu(Inventory())
        out = capsys.readouterr().out
        assert "Entrada invalida. Tente novamente." in out
        assert "Opcao invalida. Tente novamente." in out
        assert "Encerrando" in out

    def test_eof_exits(self, answers, capsys):
        answers()
        cli.run_menu(Inventory())
        assert "Encerrando" in capsys.readouterr().out

    @pytest.mark.parametrize("qtd", ["0", "21", "x"])
    def test_register_rejects_bad_quantity(self, answers, capsys, qtd):
        answers("1", qtd, "0")
        inv = Inventory()
        cli.run_menu(inv)
        assert "invalida" in capsys.readouterr().out
        assert inv.n == 0

    def test_sort_without_components(self, answers, capsys):
        answers("4", "0")
        cli.run_menu(Inventory())
        assert "Nenhum componente cadastrado." in capsys.readouterr().out

    def test_search_declined_when_unsorted(self, answers, capsys):
        answers("9", "6", "0", "0")
        inv = Inventory()
        cli.run_menu(inv)
        out = capsys.readouterr().out
        assert "Operacao de busca abortada." in out
        assert not inv.sorted_by_name

    def test_search_offers_to_sort_first(self, answers, capsys):
        answers("1", "1", "gama", "", "", "6", "1", "gama", "0")
        inv = Inventory()
        cli.run_menu(inv)
        out = capsys.readouterr().out
        assert "Ordenacao por NOME concluida (comparacoes=0" in out
        assert "Componente encontrado no indice 0:" in out
        assert "Tipo: geral" in out
        assert "Prioridade: 5" in out

    def test_search_not_found_and_empty_key(self, answers, capsys):
        inv = Inventory()
        inv.register([("a", "t", 1), ("b", "t", 2)])
        inv.sort_by_name()
        answers("6", "zz", "6", "", "0")
        cli.run_menu(inv)
        out = capsys.readouterr().out
        assert "Componente NAO encontrado." in out
        assert "Nome vazio. Abortando busca." in out

    def test_export_and_import(self, answers, capsys, tmp_path):
        path = str(tmp_path / "lote.csv")
        inv = Inventory()
        answers("9", "8", path, "7", path, "0")
        cli.run_menu(inv)
        out = capsys.readouterr().out
        assert f"Componentes salvos em {path}" in out
        assert "Importados 10 componentes" in out
        assert inv.components == dl.generate_synthetic()

    def test_import_error_is_reported(self, answers, capsys, tmp_path):
        answers("7", str(tmp_path / "nao_existe.csv"), "0")
        cli.run_menu(Inventory())
        assert "Erro ao ler CSV" in capsys.readouterr().out


class TestMain:
    def test_demo_batch(self, answers, capsys):
        answers("2", "0")
        assert cli.main(["--demo", "5"]) == 0
        assert "total: 5" in capsys.readouterr().out

    def test_csv_batch(self, answers, capsys, tmp_path):
        p = tmp_path / "c.csv"
        p.write_text("name,type,priority\nantena,comunicacao,9\n", encoding="utf-8")
        answers("2", "0")
        assert cli.main(["--csv", str(p)]) == 0
        assert "antena" in capsys.readouterr().out

    def test_missing_csv(self, tmp_path):
        assert cli.main(["--csv", str(tmp_path / "x.csv")]) == 1


def oversized_csv(tmp_path):
    # campo acima do limite padrão do módulo csv (131072)
    p = tmp_path / "grande.csv"
    p.write_text("name,type,priority\n" + "x" * 200000 + ",t,1\n", encoding="utf-8")
    return str(p)


class TestMalformedCsv:
    def test_menu_reports_oversized_field(self, answers, capsys, tmp_path):
        inv = Inventory()
        inv.register([("a", "t", 1)])
        answers("7", oversized_csv(tmp_path), "0")
        cli.run_menu(inv)
        out = capsys.readouterr().out
        assert "Erro ao ler CSV" in out
        assert "Encerrando" in out
        assert [c.name for c in inv] == ["a"]

    def test_main_rejects_oversized_field(self, tmp_path):
        assert cli.main(["--csv", oversized_csv(tmp_path)]) == 1
