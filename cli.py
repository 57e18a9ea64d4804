# cli.py
import argparse
import logging
from typing import Iterable, List, Optional

import requests

from models import Component, MAX_COMPONENTS
from inventory import Inventory, NotSortedByNameError
import data_loader as dl
from csv_url_loader import load_components_from_url

log = logging.getLogger(__name__)

SORT_LABELS = {
    "name": "NOME (Bubble Sort)",
    "type": "TIPO (Insertion Sort)",
    "priority": "PRIORIDADE (Selection Sort)",
}

MENU = f"""
Menu:
1 - Cadastrar componentes (ate {MAX_COMPONENTS})
2 - Mostrar componentes
3 - Ordenar por NOME (Bubble Sort)
4 - Ordenar por TIPO (Insertion Sort)
5 - Ordenar por PRIORIDADE (Selection Sort)
6 - Buscar componente por NOME (Busca binaria - requer ordenado por nome)
7 - Importar CSV (arquivo ou URL)
8 - Exportar CSV
9 - Gerar lote demo
0 - Sair"""

RULE = "-" * 57

def render_components(components: List[Component]) -> str:
    if not components:
        return "\n[Sem componentes cadastrados]"
    lines = [
        f"\nLista de componentes (total: {len(components)})",
        RULE,
        f"| {'ID':<2} | {'NOME':<28} | {'TIPO':<10} | PRIOR.",
        RULE,
    ]
    for i, c in enumerate(components):
        lines.append(f"| {i:2d} | {c.name:<28} | {c.type:<10} | {c.priority:4d}")
    lines.append(RULE)
    return "\n".join(lines)

# ---------------- Entrada ----------------
def read_line(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""

def read_int(prompt: str) -> Optional[int]:
    try:
        return int(read_line(prompt).strip())
    except ValueError:
        return None

# ---------------- Ações ----------------
def do_register(inv: Inventory) -> None:
    qtd = read_int(f"\nQuantos componentes deseja cadastrar (max {MAX_COMPONENTS})? ")
    if qtd is None:
        print("Entrada invalida.")
        return
    if qtd < 1 or qtd > MAX_COMPONENTS:
        print(f"Quantidade invalida. Deve ser entre 1 e {MAX_COMPONENTS}.")
        return
    batch = []
    for i in range(qtd):
        print(f"\nComponente {i}:")
        name = read_line("Nome: ")
        type_ = read_line("Tipo: ")
        prio = dl.parse_priority(read_line("Prioridade (1..10): "))
        batch.append((name, type_, prio))
    n = inv.register(batch)
    print(f"\nCadastro concluido com {n} componentes.")

def do_sort(inv: Inventory, field: str) -> None:
    if not inv.n:
        print("Nenhum componente cadastrado.")
        return
    sm = getattr(inv, f"sort_by_{field}")()
    print(f"\nOrdenacao por {SORT_LABELS[field]} concluida.")
    print(f"Comparacoes realizadas: {sm.comparisons}")
    print(f"Tempo gasto (s): {sm.time_s:.6f}")
    print(render_components(inv.components))

def do_search(inv: Inventory) -> None:
    if not inv.n:
        print("Nenhum componente cadastrado.")
        return
    if not inv.sorted_by_name:
        print("A busca binaria exige que o vetor esteja ordenado por NOME (opcao 3).")
        if read_int("Deseja ordenar por NOME agora? (1-sim / 0-nao): ") != 1:
            print("Operacao de busca abortada.")
            return
        sm = inv.sort_by_name()
        print(f"Ordenacao por NOME concluida (comparacoes={sm.comparisons}, tempo={sm.time_s:.6f} s)")
    key = read_line("Digite o NOME do componente a buscar (exato): ")
    if not key:
        print("Nome vazio. Abortando busca.")
        return
    try:
        met = inv.search_by_name(key)
    except NotSortedByNameError as e:
        print(str(e))
        return
    print(f"Comparacoes na busca binaria: {met.comparisons}")
    if met.found:
        c = inv.get(met.index)
        print(f"Componente encontrado no indice {met.index}:")
        print(f"  Nome: {c.name}\n  Tipo: {c.type}\n  Prioridade: {c.priority}")
    else:
        print("Componente NAO encontrado.")

def load_batch(source: str) -> List[Component]:
    if source.lower().startswith(("http://", "https://")):
        return load_components_from_url(source)
    return dl.parse_csv(source)

def do_import(inv: Inventory) -> None:
    source = read_line("Caminho ou URL do CSV: ").strip()
    if not source:
        print("Nenhum arquivo informado.")
        return
    try:
        comps = load_batch(source)
    except (OSError, ValueError, requests.RequestException) as e:
        print(f"Erro ao ler CSV: {e}")
        return
    n = inv.register(comps)
    print(f"Importados {n} componentes de '{source}'.")

def do_export(inv: Inventory) -> None:
    if not inv.n:
        print("Nada a salvar.")
        return
    path = read_line("Salvar em (arquivo .csv): ").strip()
    if not path:
        print("Nenhum arquivo informado.")
        return
    try:
        dl.write_csv(path, inv.components)
    except OSError as e:
        print(f"Erro ao salvar: {e}")
        return
    print(f"Componentes salvos em {path}")

def do_demo(inv: Inventory) -> None:
    n = inv.register(dl.generate_synthetic())
    print(f"Lote demo gerado com {n} componentes.")

ACTIONS = {
    1: do_register,
    2: lambda inv: print(render_components(inv.components)),
    3: lambda inv: do_sort(inv, "name"),
    4: lambda inv: do_sort(inv, "type"),
    5: lambda inv: do_sort(inv, "priority"),
    6: do_search,
    7: do_import,
    8: do_export,
    9: do_demo,
}

def run_menu(inv: Inventory) -> None:
    print("=== Torre de Resgate - Organizador de Componentes ===")
    while True:
        print(MENU)
        try:
            raw = input("Escolha uma opcao: ")
        except EOFError:
            raw = "0"
        try:
            opcao = int(raw.strip())
        except ValueError:
            print("Entrada invalida. Tente novamente.")
            continue
        if opcao == 0:
            print("Encerrando o organizador de componentes.")
            return
        action = ACTIONS.get(opcao)
        if action is None:
            print("Opcao invalida. Tente novamente.")
            continue
        action(inv)

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="torre-resgate", description="Organizador de componentes da Torre de Resgate")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--csv", metavar="PATH", help="cadastra os componentes de um CSV (arquivo ou URL) ao iniciar")
    src.add_argument("--demo", metavar="N", type=int, help="cadastra um lote demo com N componentes ao iniciar")
    p.add_argument("-v", "--verbose", action="store_true", help="log em nivel DEBUG")
    return p

def main(argv: Optional[Iterable[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    inv = Inventory()
    if args.csv:
        try:
            inv.register(load_batch(args.csv))
        except (OSError, ValueError, requests.RequestException) as e:
            log.error("Could not load %s: %s", args.csv, e)
            return 1
    elif args.demo is not None:
        inv.register(dl.generate_synthetic(n=args.demo))
    run_menu(inv)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
