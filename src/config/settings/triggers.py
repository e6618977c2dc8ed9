"""Settings dos gatilhos de documento Firestore.

Uma flag de habilitação e um padrão de caminho monitorado por tipo de
evento (created, updated, deleted), além do banco monitorado.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

DocumentEventKind = Literal["created", "updated", "deleted"]

DEFAULT_WILDCARD_PATH = "{collectionId}/{documentId}"
DEFAULT_DATABASE_NAME = "(default)"


@dataclass(frozen=True)
class TriggerSettings:
    """Configurações dos gatilhos.

    Attributes:
        enable_create: Entrega webhooks de criação
        enable_update: Entrega webhooks de atualização
        enable_delete: Entrega webhooks de remoção
        create_path: Padrão de caminho monitorado para criação
        update_path: Padrão de caminho monitorado para atualização
        delete_path: Padrão de caminho monitorado para remoção
        database_name: Banco Firestore monitorado
    """

    enable_create: bool = True
    enable_update: bool = True
    enable_delete: bool = True
    create_path: str = DEFAULT_WILDCARD_PATH
    update_path: str = DEFAULT_WILDCARD_PATH
    delete_path: str = DEFAULT_WILDCARD_PATH
    database_name: str = DEFAULT_DATABASE_NAME

    def is_enabled(self, kind: DocumentEventKind) -> bool:
        """Retorna a flag de habilitação do tipo de evento."""
        return {
            "created": self.enable_create,
            "updated": self.enable_update,
            "deleted": self.enable_delete,
        }[kind]

    def path_pattern(self, kind: DocumentEventKind) -> str:
        """Retorna o padrão de caminho monitorado do tipo de evento."""
        return {
            "created": self.create_path,
            "updated": self.update_path,
            "deleted": self.delete_path,
        }[kind]

    def validate(self) -> list[str]:
        """Valida padrões de caminho.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []
        for env_name, pattern in (
            ("CREATE_COLLECTION_PATH", self.create_path),
            ("UPDATE_COLLECTION_PATH", self.update_path),
            ("DELETE_COLLECTION_PATH", self.delete_path),
        ):
            segments = pattern.strip("/").split("/") if pattern.strip("/") else []
            if not segments:
                errors.append(f"{env_name} não pode ser vazio")
            elif len(segments) % 2 != 0 and not segments[-1].endswith("=**}"):
                errors.append(f"{env_name} deve apontar para documentos: {pattern}")

        if not self.database_name:
            errors.append("DATABASE_NAME não pode ser vazio")

        return errors


def _parse_flag(raw: str | None, default: bool = True) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("true", "1", "yes")


def _load_from_env() -> TriggerSettings:
    """Carrega TriggerSettings de variáveis de ambiente."""
    return TriggerSettings(
        enable_create=_parse_flag(os.getenv("ENABLE_CREATE_WEBHOOK")),
        enable_update=_parse_flag(os.getenv("ENABLE_UPDATE_WEBHOOK")),
        enable_delete=_parse_flag(os.getenv("ENABLE_DELETE_WEBHOOK")),
        create_path=os.getenv("CREATE_COLLECTION_PATH") or DEFAULT_WILDCARD_PATH,
        update_path=os.getenv("UPDATE_COLLECTION_PATH") or DEFAULT_WILDCARD_PATH,
        delete_path=os.getenv("DELETE_COLLECTION_PATH") or DEFAULT_WILDCARD_PATH,
        database_name=os.getenv("DATABASE_NAME") or DEFAULT_DATABASE_NAME,
    )


@lru_cache(maxsize=1)
def get_trigger_settings() -> TriggerSettings:
    """Retorna instância cacheada de TriggerSettings."""
    return _load_from_env()
