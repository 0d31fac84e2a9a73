"""Ponte Azure Monitor (alertas de log) -> webhook do Microsoft Teams.

Este pacote contém:
- constants: variáveis de ambiente e constantes do MessageCard
- schemas: modelos do alerta recebido e do card enviado
- formatters: conversão alerta -> MessageCard
- services: envio do card para o webhook do Teams
- handler: pipeline parse -> transform -> deliver -> resposta
- controller: criação do Flask app e endpoints
"""
