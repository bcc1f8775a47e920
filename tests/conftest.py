import pytest

FORMULAS = [
    'p',
    '~p',
    'p > q',
    'p + ~p',
    '(p * q) + r',
    '~(p + q)',
    '~~p',
    '~(p > q)',
    'p > q > r',
    '(p > q) > r',
    '(p + q) * ~r > s',
    '~(a * (b + ~c)) + (d > a)',
    '(a * b) + (c * d) + (e * f)',
    'x1 * (x2 > ~(x3 + x1))',
]


@pytest.fixture(params=FORMULAS)
def formula(request):
    return request.param
