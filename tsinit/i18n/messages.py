"""Localized strings used throughout tsinit.

Every ``Language`` must provide a non-empty string for every ``MessageId``;
``missing_messages`` reports the gaps and the test-suite keeps it empty.
The active language lives on a ``Messages`` instance created per run, so two
runs (or two tests) never share it.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported interface languages."""
    EN = "en"
    PT = "pt"


class MessageId(str, Enum):
    """Identifiers of every user-facing message."""
    SELECT_LANGUAGE = "selectLanguage"
    PROJECT_NAME = "projectName"
    REPO_URL_TYPE = "repoURLType"
    REPO_URL = "repoURL"
    BRANCH_NAME = "branchName"
    NEW_REPO_URL = "newRepoURL"
    MAIN_BRANCH_NAME = "mainBranchName"
    OPERATION_CANCELED = "operationCanceled"
    CREATING_PROJECT = "creatingProject"
    INSTALLING_DEPENDENCIES = "installingDependencies"
    SETTING_REMOTE = "settingRemote"
    CLEANING_UP_BRANCHES = "cleaningUpBranches"
    PROJECT_READY = "projectReady"
    ERROR_PACKAGE_JSON = "errorPackageJson"
    ERROR_OCCURRED = "errorOccurred"
    UNKNOWN_ERROR_OCCURRED = "unknownErrorOccurred"
    INVALID_GIT_REPO_URL = "invalidGitRepoURL"
    INVALID_PROJECT_NAME = "invalidProjectName"
    PACKAGE_NAME = "packageName"
    DESCRIPTION = "description"
    AUTHOR = "author"
    LICENSE = "license"
    KEYWORDS = "keywords"
    COMMITTING_CHANGES = "committingChanges"
    SUMMARY_TITLE = "summaryTitle"


# Shown in the language picker; the picker filters the label back to its code.
LANGUAGE_LABELS: dict[Language, str] = {
    Language.EN: "English",
    Language.PT: "Português",
}


MESSAGES: dict[Language, dict[MessageId, str]] = {
    Language.EN: {
        MessageId.SELECT_LANGUAGE: "Select your language",
        MessageId.PROJECT_NAME: "What is your project name? (c: to cancel)",
        MessageId.REPO_URL_TYPE: "Which type of URL do you want to use for the repository?",
        MessageId.REPO_URL: (
            "Which TypeScript template repository you want to use (Repo URL)? (c: to cancel)"
        ),
        MessageId.BRANCH_NAME: "Which branch do you want to clone? (leave blank for default branch)",
        MessageId.NEW_REPO_URL: (
            "Enter the new GitHub repository URL for your project "
            "(leave blank to skip, c: to cancel):"
        ),
        MessageId.MAIN_BRANCH_NAME: "Choose the main branch name (master or main):",
        MessageId.OPERATION_CANCELED: "Operation canceled by the user.",
        MessageId.CREATING_PROJECT: "Creating a new project in .",
        MessageId.INSTALLING_DEPENDENCIES: "Installing dependencies 💼...",
        MessageId.SETTING_REMOTE: "Setting new remote origin to ",
        MessageId.CLEANING_UP_BRANCHES: "Cleaning up branches...",
        MessageId.PROJECT_READY: "Project is ready to go! 🚀🚀🚀",
        MessageId.ERROR_PACKAGE_JSON: (
            "Error: package.json not found in the template. "
            "Please check the template structure."
        ),
        MessageId.ERROR_OCCURRED: "Failed to create project due to an error: ",
        MessageId.UNKNOWN_ERROR_OCCURRED: "An unknown error occurred: ",
        MessageId.INVALID_GIT_REPO_URL: "Please enter a valid GitHub repository URL.",
        MessageId.INVALID_PROJECT_NAME: (
            "Project name can only contain letters, numbers, underscores and dashes."
        ),
        MessageId.PACKAGE_NAME: "Enter the package name (leave blank for default):",
        MessageId.DESCRIPTION: "Enter the project description (leave blank for none):",
        MessageId.AUTHOR: "Enter the author name (leave blank for none):",
        MessageId.LICENSE: "Enter the project license (default: ISC):",
        MessageId.KEYWORDS: "Enter keywords separated by commas (leave blank for none):",
        MessageId.COMMITTING_CHANGES: "Committing project metadata...",
        MessageId.SUMMARY_TITLE: "New project",
    },
    Language.PT: {
        MessageId.SELECT_LANGUAGE: "Selecione seu idioma",
        MessageId.PROJECT_NAME: "Qual é o nome do seu projeto? (c: para cancelar)",
        MessageId.REPO_URL_TYPE: "Qual tipo de URL você deseja usar para o repositório?",
        MessageId.REPO_URL: (
            "Qual repositório de template TypeScript você deseja usar "
            "(URL do repositório)? (c: para cancelar)"
        ),
        MessageId.BRANCH_NAME: (
            "Qual branch você deseja clonar? (deixe em branco para a branch padrão)"
        ),
        MessageId.NEW_REPO_URL: (
            "Insira a nova URL do repositório GitHub para o seu projeto "
            "(deixe em branco para pular, c: para cancelar):"
        ),
        MessageId.MAIN_BRANCH_NAME: "Escolha o nome da branch principal (master ou main):",
        MessageId.OPERATION_CANCELED: "Operação cancelada pelo usuário.",
        MessageId.CREATING_PROJECT: "Criando um novo projeto em .",
        MessageId.INSTALLING_DEPENDENCIES: "Instalando dependências 💼...",
        MessageId.SETTING_REMOTE: "Configurando novo remote origin para ",
        MessageId.CLEANING_UP_BRANCHES: "Limpando branches...",
        MessageId.PROJECT_READY: "Projeto está pronto para começar! 🚀🚀🚀",
        MessageId.ERROR_PACKAGE_JSON: (
            "Erro: package.json não encontrado no template. "
            "Verifique a estrutura do template."
        ),
        MessageId.ERROR_OCCURRED: "Falha ao criar o projeto devido a um erro: ",
        MessageId.UNKNOWN_ERROR_OCCURRED: "Ocorreu um erro desconhecido: ",
        MessageId.INVALID_GIT_REPO_URL: "Por favor, insira uma URL válida do repositório GitHub.",
        MessageId.INVALID_PROJECT_NAME: (
            "O nome do projeto só pode conter letras, números, sublinhados e hífens."
        ),
        MessageId.PACKAGE_NAME: "Digite o nome do pacote (deixe em branco para o padrão):",
        MessageId.DESCRIPTION: "Digite a descrição do projeto (deixe em branco para nenhum):",
        MessageId.AUTHOR: "Digite o nome do autor (deixe em branco para nenhum):",
        MessageId.LICENSE: "Digite a licença do projeto (padrão: ISC):",
        MessageId.KEYWORDS: (
            "Digite palavras-chave separadas por vírgulas (deixe em branco para nenhuma):"
        ),
        MessageId.COMMITTING_CHANGES: "Registrando os metadados do projeto...",
        MessageId.SUMMARY_TITLE: "Novo projeto",
    },
}


def missing_messages() -> list[tuple[Language, MessageId]]:
    """Return every ``(language, message)`` pair without a non-empty string."""
    missing: list[tuple[Language, MessageId]] = []
    for language in Language:
        table = MESSAGES.get(language, {})
        for message_id in MessageId:
            if not table.get(message_id):
                missing.append((language, message_id))
    return missing


class Messages:
    """Message lookup bound to one run's active language.

    Defaults to English until ``set_language`` is called (the first prompt
    of the questionnaire does that).
    """

    def __init__(self, language: Language | str = Language.EN) -> None:
        self.language = Language(language)

    def set_language(self, language: Language | str) -> None:
        """Switch the active language; raises ``ValueError`` for unknown codes."""
        self.language = Language(language)

    def get(self, message_id: MessageId | str) -> str:
        """Return the string for *message_id* in the active language."""
        return MESSAGES[self.language][MessageId(message_id)]

    def format(self, message_id: MessageId | str, detail: object = "") -> str:
        """Return the message with *detail* appended (for prefix-style messages)."""
        return f"{self.get(message_id)}{detail}"
