"""
Interactive text console for the student records.

Talks to the same StudentService as the HTTP API, so when both run in one
process they see the same students.
"""

import logging
from typing import Callable, Optional

from app.core.exceptions import BaseAPIException
from app.models.student import Student
from app.services.student.student import StudentService

logger = logging.getLogger(__name__)

MENU = """
=== SISTEMA DE GESTÃO DE ALUNOS ===
1. Adicionar aluno
2. Listar alunos
3. Buscar aluno por ID
4. Remover aluno
0. Sair"""


class StudentConsole:
    def __init__(
        self,
        service: StudentService,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.service = service
        self.input = input_func
        self.output = output
        self.actions = {
            1: self.add_student,
            2: self.list_students,
            3: self.find_student,
            4: self.remove_student,
        }

    def run(self) -> None:
        """Menu loop; returns on option 0 or end of input."""
        while True:
            self.output(MENU)
            try:
                option = self._read_int("Escolha uma opção: ")
            except EOFError:
                self.output("\nEncerrando o sistema...")
                return

            if option is None:
                self.output("Erro: Digite um número válido!")
                continue
            if option == 0:
                self.output("Encerrando o sistema...")
                return

            action = self.actions.get(option)
            if action is None:
                self.output("Opção inválida! Tente novamente.")
                continue
            try:
                action()
            except EOFError:
                self.output("\nEncerrando o sistema...")
                return

    def _read_int(self, prompt: str) -> Optional[int]:
        raw = self.input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def add_student(self) -> None:
        self.output("\n--- NOVO ALUNO ---")
        name = self.input("Nome: ").strip()
        age = self._read_int("Idade: ")
        if age is None:
            self.output("❌ Erro ao cadastrar aluno: idade deve ser um número válido")
            return
        email = self.input("Email: ").strip()
        course = self.input("Curso: ").strip()

        try:
            saved = self.service.save_student(
                Student(name=name, age=age, email=email, course=course)
            )
        except BaseAPIException as e:
            self.output(f"❌ Erro ao cadastrar aluno: {e.message}")
            return
        logger.info(f"Student {saved.id} created from console")
        self.output(f"\n✅ Aluno cadastrado com sucesso! ID: {saved.id}")

    def list_students(self) -> None:
        self.output("\n--- LISTA DE ALUNOS ---")
        students = self.service.list_students()
        if not students:
            self.output("Nenhum aluno cadastrado.")
            return
        for student in students:
            self.output(str(student))

    def find_student(self) -> None:
        self.output("\n--- BUSCAR ALUNO ---")
        student_id = self._read_int("Digite o ID do aluno: ")
        if student_id is None:
            self.output("Erro: ID deve ser um número válido!")
            return

        student = self.service.get_student(student_id)
        if student is None:
            self.output(f"Aluno não encontrado com o ID: {student_id}")
            return
        self.output("\nAluno encontrado:")
        self.output(str(student))

    def remove_student(self) -> None:
        self.output("\n--- REMOVER ALUNO ---")
        student_id = self._read_int("Digite o ID do aluno: ")
        if student_id is None:
            self.output("Erro: ID deve ser um número válido!")
            return

        if self.service.remove_student(student_id):
            logger.info(f"Student {student_id} removed from console")
            self.output("✅ Aluno removido com sucesso!")
        else:
            self.output(f"❌ Aluno não encontrado com o ID: {student_id}")


if __name__ == "__main__":
    from app.core.config import settings
    from app.core.logging import setup_logging

    setup_logging(settings.LOG_LEVEL)
    StudentConsole(StudentService()).run()
