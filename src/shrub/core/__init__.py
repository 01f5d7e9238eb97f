"""
Core do shrub.

Reúne o modelo do projeto, o codec e as responsabilidades auxiliares
(opções, precedência de escopos, hashing), sem dependência de filesystem.

Princípios fundamentais:
    - Nenhuma coerção silenciosa: valores fora da forma declarada são erro
    - Serialização determinística
    - Ausente e vazio são distintos onde o documento os distingue
"""
