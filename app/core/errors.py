"""Erreurs métier du moteur d'ordonnancement des blocks"""

from fastapi import status


class BlockError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(BlockError):
    # block ou page inexistant
    status_code = status.HTTP_404_NOT_FOUND


class InvalidArgumentError(BlockError):
    # référence vers une autre page, payload invalide
    status_code = status.HTTP_400_BAD_REQUEST


class TypeMismatchError(BlockError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(BlockError):
    # collision de position entre deux transactions concurrentes, à rejouer
    status_code = status.HTTP_409_CONFLICT


class InternalError(BlockError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
