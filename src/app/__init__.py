"""App: orquestração, casos de uso e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos do pipeline de upload
- use_cases/: casos de uso (arquivo único e lote)
- services/: classificação de mídia
- infra/: staging em disco
- protocols/: contratos/interfaces
- observability/: correlation id

Padrão: app executa; api adapta; config configura; utils apoia.
"""
