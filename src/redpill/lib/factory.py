"""
Factory for process inspector backends
"""
from typing import Type, Dict, Optional

from .config import Config
from .process.base import ProcessInspector
from .process.lsof import LsofInspector

class InspectorFactory:
    """Creates the process inspector named in the configuration"""

    _providers: Dict[str, Type[ProcessInspector]] = {
        'lsof': LsofInspector
    }

    @classmethod
    def create(cls, provider_type: Optional[str] = None, config: Optional[Config] = None) -> ProcessInspector:
        """
        Create process inspector instance

        Args:
            provider_type: Inspector name (if None, uses config.inspector)
            config: Configuration object (defaults apply if None)

        Returns:
            ProcessInspector instance

        Raises:
            ValueError: If the inspector name is not registered
        """
        if config is None:
            config = Config()
        if provider_type is None:
            provider_type = config.inspector

        inspector_class = cls._providers.get(provider_type)
        if inspector_class is None:
            raise ValueError(f"Unsupported provider: {provider_type}")
        return inspector_class(config)

    @classmethod
    def get_providers(cls) -> Dict[str, Type[ProcessInspector]]:
        """Get registered inspectors"""
        return cls._providers

    @classmethod
    def register_provider(cls, name: str, provider_class: Type[ProcessInspector]):
        """Register new inspector"""
        cls._providers[name] = provider_class
