from skistep import __main__ as main
from skistep.testing import for_each


@for_each([
    ('SII', 'SII'),
    ('(Kx)y', 'Kxy'),
    ('S(K(SII))I', 'S(K(SII))I'),
])
def test_parse(string, expected):
    assert main.parse(string) == expected


@for_each([
    ('SIIa', 10, 3),
    ('x', 10, 0),
    ('Kx', 10, 0),
    ('Kxyz', 10, 1),
    ('SII(SII)', 5, None),
])
def test_step(string, steps, expected):
    assert main.step(string, steps=steps) == expected


def test_step_prints(capsys):
    main.step('KIS')
    out, err = capsys.readouterr()
    assert out.split() == ['KIS', 'I', 'DONE']
    assert err == ''


def test_step_reports_arity_error(capsys):
    main.step('Kx')
    out, err = capsys.readouterr()
    assert out.split() == ['Kx']
    assert 'K requires 2 arguments, found 1' in err


@for_each([
    ('SII(SII)', 5, [7, 9, 8, 11, 10, 9]),
    ('Kx', 3, [3]),
    ('ab', 3, [3]),
])
def test_size(string, steps, expected):
    assert main.size(string, steps=steps) == expected
