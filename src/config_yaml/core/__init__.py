"""Núcleo do config-yaml: store, camada de configuração e rastreabilidade."""
