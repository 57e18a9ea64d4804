# main.py
import logging
import threading
import tkinter as tk
from tkinter import ttk, filedialog, messagebox, simpledialog
import customtkinter as ctk
from typing import List, Tuple

import requests

from models import Component, MAX_COMPONENTS
from inventory import Inventory
from algorithms import SortMetrics
import data_loader as dl
from csv_url_loader import load_components_from_url
from config import load_config, save_config

APP_TITLE = "Torre de Resgate — Organizador de Componentes"

log = logging.getLogger(__name__)

# ---------------- App ----------------
class App(ctk.CTk):
    def __init__(self):
        super().__init__()
        self.cfg = load_config()
        ctk.set_appearance_mode(self.cfg.get("appearance_mode", "system"))
        ctk.set_default_color_theme("blue")
        self.title(APP_TITLE)
        self.geometry("900x640")
        self.minsize(780, 540)

        self.inventory = Inventory()
        self.pending: List[Tuple[str, str, int]] = []   # lote em montagem

        self._build_ui()

    # ---------- TEMA DARK para ttk.Treeview ----------
    def _style_dark_treeview(self):
        style = ttk.Style(self)
        try:
            style.theme_use("clam")
        except tk.TclError:
            pass

        BG = "#191919"
        FG = "#EAEAEA"
        HDR_BG = "#222222"
        SEL_BG = "#2F6B9A"

        style.configure("Dark.Treeview", background=BG, fieldbackground=BG,
                        foreground=FG, borderwidth=0, rowheight=26)
        style.map("Dark.Treeview", background=[("selected", SEL_BG)], foreground=[("selected", "#FFFFFF")])
        style.configure("Dark.Treeview.Heading", background=HDR_BG, foreground=FG, relief="flat", borderwidth=0)
        style.map("Dark.Treeview.Heading", background=[("active", HDR_BG)])

    # ---------------- UI ----------------
    def _build_ui(self):
        self._style_dark_treeview()

        # Topbar
        top = ctk.CTkFrame(self); top.pack(fill="x", padx=10, pady=(10,6))
        ctk.CTkButton(top, text="Importar CSV…", command=self.load_csv).pack(side="left", padx=4)
        ctk.CTkButton(top, text="Importar CSV de URL…", command=self.load_url).pack(side="left", padx=4)
        ctk.CTkButton(top, text="Gerar Lote Demo", command=self.generate_demo).pack(side="left", padx=4)
        ctk.CTkButton(top, text="Exportar CSV…", command=self.save_csv).pack(side="left", padx=4)
        self.appearance = ctk.CTkOptionMenu(top, values=["system", "dark", "light"], command=self.set_appearance)
        self.appearance.set(self.cfg.get("appearance_mode", "system"))
        self.appearance.pack(side="right", padx=4)

        # Cadastro
        box = ctk.CTkFrame(self); box.pack(fill="x", padx=10, pady=6)
        self.name_var = tk.StringVar()
        self.type_var = tk.StringVar()
        self.prio_var = tk.StringVar(value="5")
        self.search_var = tk.StringVar()

        r1 = ctk.CTkFrame(box); r1.pack(fill="x", padx=8, pady=6)
        ctk.CTkLabel(r1, text="Nome").pack(side="left")
        ctk.CTkEntry(r1, textvariable=self.name_var, width=200).pack(side="left", padx=(4,10))
        ctk.CTkLabel(r1, text="Tipo").pack(side="left")
        ctk.CTkComboBox(r1, variable=self.type_var, width=140, values=dl.TYPES).pack(side="left", padx=(4,10))
        ctk.CTkLabel(r1, text="Prioridade (1..10)").pack(side="left")
        ctk.CTkEntry(r1, textvariable=self.prio_var, width=50).pack(side="left", padx=(4,10))
        ctk.CTkButton(r1, text="Adicionar ao lote", command=self.add_pending).pack(side="left", padx=4)
        ctk.CTkButton(r1, text="Cadastrar lote", command=self.register_pending).pack(side="left", padx=4)

        # Ordenação / Busca
        r2 = ctk.CTkFrame(box); r2.pack(fill="x", padx=8, pady=(0,8))
        ctk.CTkButton(r2, text="Ordenar por Nome (Bubble)", command=lambda: self.run_sort("name")).pack(side="left", padx=4)
        ctk.CTkButton(r2, text="Ordenar por Tipo (Insertion)", command=lambda: self.run_sort("type")).pack(side="left", padx=4)
        ctk.CTkButton(r2, text="Ordenar por Prioridade (Selection)", command=lambda: self.run_sort("priority")).pack(side="left", padx=4)
        ctk.CTkEntry(r2, textvariable=self.search_var, width=160, placeholder_text="nome exato").pack(side="left", padx=(16,4))
        ctk.CTkButton(r2, text="Buscar por Nome", command=self.run_search).pack(side="left", padx=4)

        # Tabela
        table_f = ctk.CTkFrame(self); table_f.pack(fill="both", expand=True, padx=10, pady=(0,8))
        cols = ("id", "name", "type", "priority")
        self.tree = ttk.Treeview(table_f, columns=cols, show="headings", height=MAX_COMPONENTS, style="Dark.Treeview")
        for c, h in zip(cols, ["ID", "Nome", "Tipo", "Prioridade"]):
            self.tree.heading(c, text=h, anchor="center")
            self.tree.column(c, anchor="center", width=120)
        self.tree.column("id", width=50)
        self.tree.column("name", width=260)
        self.tree.pack(side="left", fill="both", expand=True)
        vs = ctk.CTkScrollbar(table_f, command=self.tree.yview)
        vs.pack(side="right", fill="y")
        self.tree.configure(yscrollcommand=vs.set)
        self.tree.tag_configure("odd",  background="#1E1E1E")
        self.tree.tag_configure("even", background="#171717")
        self.tree.tag_configure("hit",  background="#2F6B9A")

        # Rodapé
        self.metrics_lbl = ctk.CTkLabel(self, text="Pronto.")
        self.metrics_lbl.pack(fill="x", padx=10, pady=(0,6))
        self.status_lbl = ctk.CTkLabel(self, text="Dica: monte um lote, importe um CSV ou gere um lote demo.")
        self.status_lbl.pack(fill="x", padx=10, pady=(0,10))

    def set_appearance(self, mode: str):
        ctk.set_appearance_mode(mode)
        self.cfg["appearance_mode"] = mode
        save_config(self.cfg)

    # ---------------- Cadastro ----------------
    def add_pending(self):
        if len(self.pending) >= MAX_COMPONENTS:
            messagebox.showwarning("Lote cheio", f"O lote aceita no máximo {MAX_COMPONENTS} componentes.")
            return
        self.pending.append((self.name_var.get(), self.type_var.get(), dl.parse_priority(self.prio_var.get())))
        self.name_var.set(""); self.prio_var.set("5")
        self.status_lbl.configure(text=f"Lote em montagem: {len(self.pending)} componente(s).")

    def register_pending(self):
        if not self.pending:
            messagebox.showinfo("Lote vazio", "Adicione ao menos um componente ao lote.")
            return
        batch, self.pending = self.pending, []
        n = self.set_dataset(batch)
        if n is not None:
            self.status_lbl.configure(text=f"Cadastro concluído com {n} componentes.")

    def set_dataset(self, batch) -> int | None:
        try:
            n = self.inventory.register(batch)
        except ValueError as e:
            messagebox.showerror("Cadastro inválido", str(e))
            return None
        self.refresh_table()
        self.metrics_lbl.configure(text="Novo cadastro: ordenação por nome invalidada.")
        return n

    def refresh_table(self, highlight: int | None = None):
        self.tree.delete(*self.tree.get_children())
        for idx, c in enumerate(self.inventory.components):
            tag = "hit" if idx == highlight else ("odd" if idx % 2 else "even")
            self.tree.insert("", "end", values=(idx, *c.as_row()), tags=(tag,))

    # ---------------- Arquivos ----------------
    def load_csv(self):
        path = filedialog.askopenfilename(title="Escolha o CSV", filetypes=[("CSV","*.csv")])
        if not path:
            return
        try:
            comps = dl.parse_csv(path)
        except (OSError, ValueError) as e:
            messagebox.showerror("Erro ao ler CSV", str(e))
            return
        if self.set_dataset(comps) is not None:
            self.status_lbl.configure(text=f"Importados {len(comps)} componentes de '{path}'.")

    def load_url(self):
        url = simpledialog.askstring("Importar CSV de URL", "URL (http/https):",
                                     initialvalue=self.cfg.get("last_url", ""), parent=self)
        if not url:
            return
        self.cfg["last_url"] = url
        save_config(self.cfg)
        self.status_lbl.configure(text=f"Baixando {url}…")

        def work():
            try:
                comps = load_components_from_url(url)
            except (ValueError, requests.RequestException) as e:
                log.warning("URL import failed: %s", e)
                msg = f"Falha ao importar: {e}"
                self.after(0, lambda: self.status_lbl.configure(text=msg))
                return
            self.after(0, lambda: self._imported(comps, url))

        threading.Thread(target=work, daemon=True).start()

    def _imported(self, comps: List[Component], source: str):
        if self.set_dataset(comps) is not None:
            self.status_lbl.configure(text=f"Importados {len(comps)} componentes de {source}.")

    def generate_demo(self):
        n = self.set_dataset(dl.generate_synthetic(n=12))
        self.status_lbl.configure(text=f"Lote demo gerado com {n} componentes.")

    def save_csv(self):
        if not self.inventory.n:
            messagebox.showinfo("Nada a salvar", "Não há componentes cadastrados.")
            return
        path = filedialog.asksaveasfilename(defaultextension=".csv", filetypes=[("CSV","*.csv")])
        if not path:
            return
        try:
            dl.write_csv(path, self.inventory.components)
            messagebox.showinfo("OK", f"Componentes salvos em:\n{path}")
        except OSError as e:
            messagebox.showerror("Erro ao salvar", str(e))

    # ---------------- Ordenação e Busca ----------------
    def _show_sort(self, sm: SortMetrics):
        self.refresh_table()
        self.metrics_lbl.configure(text=(
            f"Ordenados {sm.n} por '{sm.field}' ({sm.algorithm}) em {sm.time_s:.6f} s | "
            f"comparações={sm.comparisons}"
        ))

    def run_sort(self, field: str):
        if not self.inventory.n:
            messagebox.showwarning("Sem dados", "Nenhum componente cadastrado.")
            return
        self._show_sort(getattr(self.inventory, f"sort_by_{field}")())

    def run_search(self):
        if not self.inventory.n:
            messagebox.showwarning("Sem dados", "Nenhum componente cadastrado.")
            return
        key = self.search_var.get()
        if not key:
            messagebox.showerror("Entrada inválida", "Informe o nome exato do componente.")
            return
        if not self.inventory.sorted_by_name:
            if not messagebox.askyesno("Busca binária",
                                       "A busca binária exige os componentes ordenados por NOME.\n"
                                       "Deseja ordenar por nome agora?"):
                self.status_lbl.configure(text="Operação de busca abortada.")
                return
            self._show_sort(self.inventory.sort_by_name())
        met = self.inventory.search_by_name(key)
        self.refresh_table(highlight=met.index)
        if met.found:
            c: Component = self.inventory.get(met.index)
            self.status_lbl.configure(text=f"Encontrado no índice {met.index}: {c.name} · {c.type} · prioridade {c.priority}")
        else:
            self.status_lbl.configure(text=f"'{key}' não encontrado.")
        self.metrics_lbl.configure(text=f"Busca binária | comparações={met.comparisons}")

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    App().mainloop()

if __name__ == "__main__":
    main()
