"""Interactive text menu of the ticket office."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

from .cart import format_cart, list_tickets
from .events import format_event, print_event_base, read_event, register_event, delete_event
from .searches import (
    binary_search_event,
    binary_search_user,
    sequential_search_event,
    sequential_search_user,
)
from .store import Store
from .users import User, UserType, format_user, login, print_user_base, register_user
from .utilities import RecordType, clear_screen, pause_screen, record_count

DEMO_PASSWORD = "password"
DEMO_PHONE = "000-0000"
DEMO_CPF = "000.000.000-00"

DEMO_PRODUCER = ("Davi", "davi@example.com", DEMO_PASSWORD, DEMO_PHONE, DEMO_CPF, UserType.PRODUCER)
DEMO_CLIENT = ("Arthur", "arthur@example.com", DEMO_PASSWORD, DEMO_PHONE, DEMO_CPF, UserType.CLIENT)

DEMO_EVENT = ("Arraial D&A Producoes", "O melhor arraial da regiao!", 100, 20.5)


def _error(message: str) -> None:
    print(f"\033[1;31m{message}\033[0m", file=sys.stderr, flush=True)


def _ask(prompt: str = "") -> Optional[int]:
    """Read one integer; None when the line holds none. EOFError ends the session."""
    line = input(prompt)
    tokens = line.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


class _Session:
    def __init__(self, store: Store, account: tuple) -> None:
        self.store = store
        self.account = account
        self.user: Optional[User] = None

    def run(self) -> None:
        while True:
            clear_screen()
            print("--------------------------- MENU ---------------------------")
            print("1 - Ordenar Base")
            print("2 - Fazer Busca")
            print("3 - Cadastrar UsuArio")
            print("4 - Login")
            print("5 - Menu Eventos")
            print("6 - Carrinho")
            print("7 - Ingressos")
            print("8 - Logout")
            print("0 - sair")
            print("-------------------------- SAIDA ---------------------------")
            choice = _ask()
            if choice == 0:
                return
            action = {
                1: self.sort_menu,
                2: self.search_menu,
                3: self.register_users,
                4: self.login,
                5: self.events_menu,
                6: self.cart_menu,
                7: self.tickets,
                8: self.logout,
            }.get(choice)
            if action is not None:
                action()

    def sort_menu(self) -> None:
        store = self.store
        while True:
            clear_screen()
            print("----------------- Tipo de Ordenação -----------------")
            print("Usaremos a Ordenaçao por HeapSort!")
            print("Voce deseja odernar:")
            print("1 - A base de Eventos")
            print("2 - A base de Usuarios")
            print("3 - Voltar")
            print("----------------- SAIDA -----------------")
            choice = _ask()
            if choice == 3:
                return
            if choice == 1:
                clear_screen()
                print("\nVoce escolheu ordenar a base de eventos!")
                print("A base desordenada:")
                print_event_base(store.events)
                print("\n")
                print("------------------------------------")
                print("Agora a base ordenada!")
                store.sort_events()
                print_event_base(store.events)
                pause_screen()
            elif choice == 2:
                clear_screen()
                print("\nVoce escolheu ordenar a base de Usuarios!")
                print("A base desordenada:")
                print_user_base(store.users)
                print("\n")
                print("------------------------------------")
                print("Agora a base ordenada!")
                store.sort_users()
                print_user_base(store.users)
                pause_screen()

    def search_menu(self) -> None:
        clear_screen()
        while True:
            print("----------------- Tipo de Busca -----------------")
            print("1 - Busca Sequencial")
            print("2 - Busca Binária")
            print("3 - Voltar")
            print("----------------- SAIDA -----------------")
            choice = _ask()
            if choice == 3:
                return
            if choice == 1:
                self._sequential_menu()
            elif choice == 2:
                self._binary_menu()
            else:
                print("Opção Invalida", end="")

    def _target_menu(self, kind: str) -> Optional[int]:
        clear_screen()
        print("----------------- OPCOES -----------------")
        print(f"Voce deseja usar Busca {kind} em:")
        print("1 - Eventos")
        print("2 - Usuarios")
        print("3 - Voltar")
        print("----------------- SAIDA -----------------")
        return _ask()

    def _sequential_menu(self) -> None:
        store = self.store
        while True:
            choice = self._target_menu("Sequencial")
            if choice == 3:
                return
            if choice == 1:
                print("Voce escolheu Eventos!")
                key = _ask("Informe o ID do evento: ")
                event = sequential_search_event(store.events, key, store.log)
                if event is None:
                    print(f"Id de numero {key} nao encontrado.", end="")
                    print("Tente novamente", end="")
                    continue
                print(format_event(event), end="")
                pause_screen()
            elif choice == 2:
                print("Voce escolheu Usuarios!")
                key = _ask("Informe o ID do usuario: ")
                user = sequential_search_user(store.users, key, store.log)
                if user is None:
                    print(f"Id de numero {key} nao encontrado.", end="")
                    print("Tente novamente", end="")
                    continue
                print(format_user(user), end="")
                pause_screen()
            else:
                print("Opcao Invalida", end="")

    def _binary_menu(self) -> None:
        store = self.store
        while True:
            choice = self._target_menu("Binária")
            if choice == 3:
                return
            if choice == 1:
                print("Você escolheu Eventos!")
                print("A base tem que estar ordenada!\nOrdenando...")
                store.sort_events()
                key = _ask("Ordenado!\nAgora informe o ID do evento: ")
                last = record_count(store.events, RecordType.EVENT) - 1
                event = None if key is None else binary_search_event(
                    store.events, key, 0, last, store.log
                )
                if event is None:
                    print(f"Id de numero {key} não encontrado.", end="")
                    print("Tente novamente", end="")
                    pause_screen()
                    continue
                print(format_event(event), end="")
                pause_screen()
            elif choice == 2:
                print("Você escolheu Usuarios!")
                print("A base tem que estar ordenada!\nOrdenando...")
                store.sort_users()
                key = _ask("Ordenado!\nAgora informe o ID do Usuario: ")
                last = record_count(store.users, RecordType.USER) - 1
                user = None if key is None else binary_search_user(
                    store.users, key, 0, last, store.log
                )
                if user is None:
                    print(f"Id de numero {key} não encontrado.", end="")
                    print("Tente novamente", end="")
                    continue
                print(format_user(user), end="")
                pause_screen()
            else:
                print("Opção Invalida", end="")

    def register_users(self) -> None:
        clear_screen()
        print("Informe os dados para o cadastro: ")
        for account in (DEMO_PRODUCER, DEMO_CLIENT):
            register_user(self.store.users, *account)
        print_user_base(self.store.users)
        pause_screen()

    def login(self) -> None:
        if self.user is not None:
            print("\nVoce ja esta logado.")
        else:
            email, password = self.account[1], self.account[2]
            print("--- Login ---")
            print(f"Email: {email} ", end="")
            self.user = login(self.store.users, email, password)
            if self.user is not None:
                print(f"\nLogin bem-sucedido! Bem-vindo(a), {self.user.name}!")
            else:
                _error("\nEmail ou senha incorretos.\n")
        pause_screen()

    def events_menu(self) -> None:
        clear_screen()
        if self.user is None:
            self._visitor_menu()
        elif self.user.user_type is UserType.PRODUCER:
            self._producer_menu()
        else:
            self._client_menu()

    def _visitor_menu(self) -> None:
        while True:
            clear_screen()
            print("--- Menu de Eventos (Visitante) ---")
            print("1 - Listar Eventos")
            print("2 - Voltar ao Menu Principal")
            print("-------------------------------------")
            choice = _ask("Escolha uma opcaoo: ")
            if choice == 1:
                print("\n--- Lista de Todos os Eventos ---")
                print_event_base(self.store.events)
                pause_screen()
            elif choice == 2:
                print("\nVoltando ao menu principal...")
                return
            else:
                _error("\nOpcaoo invalida!\n")
                pause_screen()

    def _producer_menu(self) -> None:
        store = self.store
        while True:
            clear_screen()
            print("--- Menu de Eventos (Produtor) ---")
            print("1 - Cadastrar Novo Evento")
            print("2 - Listar Eventos")
            print("3 - Deletar um Evento")
            print("4 - Voltar ao Menu Principal")
            print("----------------------------------")
            choice = _ask("Escolha uma opcao: ")
            if choice == 1:
                clear_screen()
                print("Informe os dados para o cadastro: ")
                register_event(store.events, *DEMO_EVENT)
                pause_screen()
            elif choice == 2:
                print("\n--- Listagem de Eventos ---")
                print_event_base(store.events)
                pause_screen()
            elif choice == 3:
                print("\n--- Exclusão de Evento ---")
                event_id = _ask("Informe o ID do evento a ser deletado: ")
                store.events.seek(0)
                if read_event(store.events) is None:
                    print("Nenhum evento disponível para exclusão.")
                elif event_id is not None and delete_event(store.events, event_id):
                    print(f"Evento com ID {event_id} excluído com sucesso!")
                else:
                    print(f"Evento com ID {event_id} não encontrado.")
                pause_screen()
            elif choice == 4:
                print("\nVoltando ao menu principal...")
                return
            else:
                _error("\nOpcao invalida!\n")
                pause_screen()

    def _client_menu(self) -> None:
        while True:
            clear_screen()
            print("------ Menu de Eventos (Cliente) ------")
            print("1 - Listar Todos os Eventos")
            print("2 - Adicionar Ingresso ao Carrinho")
            print("3 - Voltar ao Menu Principal")
            print("---------------------------------------")
            choice = _ask("Escolha uma opcaoo: ")
            if choice == 1:
                print("\n--- Lista de Todos os Eventos ---")
                print_event_base(self.store.events)
                pause_screen()
            elif choice == 2:
                if self.store.add_first_event_to_cart(self.user.id) is not None:
                    pause_screen()
            elif choice == 3:
                print("\nVoltando ao menu principal...")
                return
            else:
                _error("\nOpcaoo invalida!\n")
                pause_screen()

    def cart_menu(self) -> None:
        if self.user is None:
            _error("Faça login para continuar!")
            return
        store, client_id = self.store, self.user.id
        while True:
            clear_screen()
            print("--- Carrinho ---")
            print("1 - Consultar Carrinho")
            print("2 - Limpar Carrinho")
            print("3 - Finalizar carrinho (comprar)")
            print("4 - Voltar para o menu inicial")
            print("-------------------------------------")
            choice = _ask("Escolha uma opcaoo: ")
            if choice == 1:
                cart = store.find_cart(client_id)
                if cart is not None:
                    print(format_cart(cart), end="")
                pause_screen()
            elif choice == 2:
                store.remove_first_item(client_id)
                pause_screen()
            elif choice == 3:
                store.checkout_client(client_id)
                pause_screen()
            elif choice == 4:
                print("\nVoltando ao menu principal...")
                break
            else:
                _error("\nOpcaoo invalida!\n")
                pause_screen()
        pause_screen()

    def tickets(self) -> None:
        if self.user is None:
            _error("Faça login para visualizar seus ingressos!")
        else:
            list_tickets(self.store.tickets, self.user.id)
        pause_screen()

    def logout(self) -> None:
        if self.user is not None:
            print(f"\n{self.user.name} deslogado com sucesso.")
            self.user = None
        else:
            print("\nNenhum usuario esta logado.")
        pause_screen()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bilheteria", description="Ticket office menu.")
    parser.add_argument("--directory", default=".", help="where the data files live")
    parser.add_argument("--events", type=int, default=10, help="events to generate")
    parser.add_argument("--users", type=int, default=10, help="users to generate")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--login-as",
        choices=("client", "producer"),
        default="client",
        help="which demo account the login option uses",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the data files, generate the bases and run the menu until the user leaves."""
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    try:
        store = Store.open(args.directory, rng)
    except OSError as exc:
        _error(f"Erro ao abrir arquivos de dados: {exc}")
        return 1
    account = DEMO_PRODUCER if args.login_as == "producer" else DEMO_CLIENT
    with store:
        store.seed(args.events, args.users)
        try:
            _Session(store, account).run()
        except EOFError:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())