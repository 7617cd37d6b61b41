import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import qbank_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


MC_SIMPLE_BLOCK = """TOPIC: Credit Cards / Revolving Credit
STATEMENT: Which interest rate applies to revolving credit card balances?
A Fixed rate set by law
B Variable rate agreed in the contract
C No interest is ever charged
D Only the late payment fee
E The savings account rate
ANSWER: B"""

MC_METADATA_BLOCK = """QUESTÃO 7
BANCA: CESGRANRIO
ANO: 2018
TEMA: Matemática Financeira - Juros Compostos
Enunciado: Um capital de R$ 1.000,00 aplicado a juros compostos de 10% ao mês rende quanto de juros após dois meses?
Alternativas:
(A) R$ 200,00
(B) R$ 210,00
(C) R$ 220,00
(D) R$ 100,00
(E) R$ 121,00
GABARITO: B"""

TF_BRACKETED_BLOCK = """QUESTÃO 8
BANCA: CESPE
ANO: 2019
TEMA: Direito Constitucional
Enunciado: A Constituição Federal admite a pena de morte em caso de guerra declarada.
( ) CERTO
( ) ERRADO
GABARITO: C"""

TF_BARE_BLOCK = """BOARD: X
YEAR: 2018
STATEMENT: Compound interest always grows slower than simple interest over long periods.
TRUE
FALSE
ANSWER: FALSE"""


# Common test fixtures
@pytest.fixture
def mc_simple_block() -> str:
    """Multiple-choice block with topic, statement label and bare A-E lines."""
    return MC_SIMPLE_BLOCK


@pytest.fixture
def mc_metadata_block() -> str:
    """Portuguese multiple-choice block with board, year and "(A)" options."""
    return MC_METADATA_BLOCK


@pytest.fixture
def tf_bracketed_block() -> str:
    """Portuguese true/false block with "( ) CERTO / ( ) ERRADO" markers."""
    return TF_BRACKETED_BLOCK


@pytest.fixture
def tf_bare_block() -> str:
    """English true/false block with bare TRUE / FALSE lines."""
    return TF_BARE_BLOCK


@pytest.fixture
def separated_document() -> str:
    """Three blocks joined by separator lines, all recognizable."""
    return "\n---\n".join([MC_SIMPLE_BLOCK, MC_METADATA_BLOCK, TF_BARE_BLOCK])


@pytest.fixture
def headed_document() -> str:
    """Two blocks delimited only by QUESTÃO headings."""
    return MC_METADATA_BLOCK + "\n\n" + TF_BRACKETED_BLOCK
