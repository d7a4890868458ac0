"""
Exceptions du domaine MovieDB.

- ValidationError : champ obligatoire vide (titre, nom d'acteur, saisie du dialogue)
- PersistenceError : echec au niveau du driver (connexion, contrainte, requete invalide)

Une lecture sans resultat n'est pas une erreur : les DAOs retournent None.
"""

from typing import Optional


class MovieDbError(Exception):
    """Classe de base des erreurs de l'application."""


class ValidationError(MovieDbError):
    """
    Exception levee quand un champ obligatoire est vide ou invalide.

    Attributes:
        field: Nom du champ en cause
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class PersistenceError(MovieDbError):
    """
    Exception levee quand une operation sur la base de donnees echoue.

    Attributes:
        code: Code d'erreur du driver (ex: "SQLITE_CONSTRAINT_PRIMARYKEY"),
              ou None si non disponible.
        driver_message: Message d'origine du driver, ou None.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        driver_message: Optional[str] = None,
    ) -> None:
        self.code = code
        self.driver_message = driver_message
        super().__init__(message)

    @classmethod
    def from_exception(cls, exc: Exception, operation: str = "") -> "PersistenceError":
        """
        Construit une PersistenceError depuis une erreur du driver.

        Le code provient en priorite de l'exception sqlite3 d'origine
        (sqlite_errorname), sinon du code SQLAlchemy.

        Args:
            exc: Erreur capturee (SQLAlchemyError en pratique)
            operation: Description courte de l'operation en echec

        Returns:
            La PersistenceError correspondante
        """
        orig = getattr(exc, "orig", None)
        code = getattr(orig, "sqlite_errorname", None) or getattr(exc, "code", None)
        driver_message = str(orig) if orig is not None else str(exc)
        prefix = f"{operation}: " if operation else ""
        return cls(f"{prefix}{driver_message}", code=code, driver_message=driver_message)
