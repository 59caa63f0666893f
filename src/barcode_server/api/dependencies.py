"""Dependency injection container for FastAPI"""

from typing import Optional

from barcode_server.adapter import (
    AztecEncoderImpl,
    Code39EncoderImpl,
    Code93EncoderImpl,
    Code128EncoderImpl,
    EanEncoderImpl,
    PngSerializerImpl,
    QrEncoderImpl,
)
from barcode_server.application import EncoderDispatcher, GenerateCodeImpl
from barcode_server.config import load_or_create_config
from barcode_server.domain import ServerConfig
from barcode_server.port.input import GenerateCode
from barcode_server.port.output import ImageSerializer


class DependencyContainer:
    """
    Dependency injection container for the barcode server.

    Manages singleton instances of encoders, serializer and use cases. All of
    them are stateless, so one instance serves every request.
    """

    def __init__(self, config: Optional[ServerConfig] = None):
        """
        Initialize container with optional configuration.

        Args:
            config: Server configuration (if None, loaded from environment)
        """
        self._config = config
        self._dispatcher: Optional[EncoderDispatcher] = None
        self._serializer: Optional[ImageSerializer] = None
        self._generate_code: Optional[GenerateCode] = None

    def get_config(self) -> ServerConfig:
        """Get server configuration"""
        if self._config is None:
            self._config = load_or_create_config()
        return self._config

    def get_dispatcher(self) -> EncoderDispatcher:
        """Get encoder dispatcher (singleton)"""
        if self._dispatcher is None:
            self._dispatcher = EncoderDispatcher(
                [
                    EanEncoderImpl(),
                    Code39EncoderImpl(),
                    Code93EncoderImpl(),
                    Code128EncoderImpl(),
                    AztecEncoderImpl(),
                    QrEncoderImpl(error_correction="M"),
                ]
            )
        return self._dispatcher

    def get_serializer(self) -> ImageSerializer:
        """Get image serializer (singleton)"""
        if self._serializer is None:
            self._serializer = PngSerializerImpl()
        return self._serializer

    def get_generate_code(self) -> GenerateCode:
        """Get GenerateCode use case (singleton)"""
        if self._generate_code is None:
            self._generate_code = GenerateCodeImpl(
                dispatcher=self.get_dispatcher(),
                serializer=self.get_serializer(),
                max_dimension=self.get_config().max_dimension,
            )
        return self._generate_code


# Global container instance
_container: Optional[DependencyContainer] = None


def get_container() -> DependencyContainer:
    """Get or create global dependency container"""
    global _container
    if _container is None:
        _container = DependencyContainer()
    return _container


def set_container(container: DependencyContainer) -> None:
    """Set global dependency container (useful for testing)"""
    global _container
    _container = container


# FastAPI dependency functions
def get_generate_code_use_case() -> GenerateCode:
    """FastAPI dependency for GenerateCode use case"""
    return get_container().get_generate_code()
