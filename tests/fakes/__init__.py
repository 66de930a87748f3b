"""Fakes in-memory para testes deterministas (sem rede/filesystem)."""
