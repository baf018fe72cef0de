"""Pacote do sistema de alertas de frustração de clientes.

Este pacote contém:
- constants: variáveis de ambiente e limiares de severidade
- classification: classificação do nível de frustração em severidade
- client: cliente HTTP genérico com token bearer
- exceptions: erros de despacho para os serviços externos
- services: escalonamento/notificação nos serviços externos (DevRev)
- controller: criação do Flask app e endpoints
"""
