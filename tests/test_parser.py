import unittest
from arith.frontend.lexer import tokenize
from arith.frontend.parser import Parser, parse
from arith.frontend.utils import Number, BinaryOp, Operator, TokenId
from arith.frontend.errors import ParseError, ExpectedNumber, UnexpectedToken

def parse_src(src):
    return parse(tokenize(src))

class TestParser(unittest.TestCase):
    def test_single_number(self):
        self.assertEqual(parse_src('42'), Number(42))

    def test_precedence(self):
        self.assertEqual(parse_src('2 + 3 * 4'),
            BinaryOp(Operator.ADD, Number(2),
                BinaryOp(Operator.MULTIPLY, Number(3), Number(4))))

    def test_precedence_mul_first(self):
        self.assertEqual(parse_src('2 * 3 - 4'),
            BinaryOp(Operator.SUBTRACT,
                BinaryOp(Operator.MULTIPLY, Number(2), Number(3)),
                Number(4)))

    def test_left_associative_add(self):
        self.assertEqual(parse_src('10 - 2 - 3'),
            BinaryOp(Operator.SUBTRACT,
                BinaryOp(Operator.SUBTRACT, Number(10), Number(2)),
                Number(3)))

    def test_left_associative_mul(self):
        self.assertEqual(parse_src('8 / 4 * 2'),
            BinaryOp(Operator.MULTIPLY,
                BinaryOp(Operator.DIVIDE, Number(8), Number(4)),
                Number(2)))

    def test_expected_number_at_end(self):
        with self.assertRaises(ExpectedNumber) as cm:
            parse_src('3 + ')
        self.assertIsNone(cm.exception.found)
        self.assertTrue(cm.exception.at_end)
        self.assertIn('end of input', str(cm.exception))

    def test_expected_number_got_operator(self):
        with self.assertRaises(ExpectedNumber) as cm:
            parse_src('3 * / 4')
        self.assertEqual(cm.exception.found.token_id, TokenId.OP_DIV)

    def test_leading_operator(self):
        with self.assertRaises(ExpectedNumber) as cm:
            parse_src('- 4')
        self.assertEqual(cm.exception.found.token_id, TokenId.OP_MINUS)

    def test_empty_input(self):
        with self.assertRaises(ExpectedNumber) as cm:
            parse_src('')
        self.assertTrue(cm.exception.at_end)

    def test_trailing_tokens_rejected(self):
        with self.assertRaises(UnexpectedToken) as cm:
            parse_src('2 + 3 4')
        self.assertEqual(cm.exception.found.value, 4)
        self.assertIsInstance(cm.exception, ParseError)

    def test_parse_expr_leaves_trailing_tokens(self):
        parser = Parser(tokenize('1 * 2 3'))
        tree = parser.parse_expr()
        self.assertEqual(tree, BinaryOp(Operator.MULTIPLY, Number(1), Number(2)))
        self.assertFalse(parser.at_end())
        self.assertEqual(parser.look(), TokenId.NUMBER)

    def test_tree_printing(self):
        self.assertEqual(str(parse_src('1 + 2 * 3')), '+\n\t1\n\t*\n\t\t2\n\t\t3\n')

    def test_long_chain_printing(self):
        dump = str(parse_src('+'.join(['1'] * 3000)))
        lines = dump.splitlines()
        self.assertEqual(len(lines), 5999)
        self.assertEqual(lines[0], '+')
        self.assertEqual(lines[2998], '\t' * 2998 + '+')
        self.assertEqual(lines[2999], '\t' * 2999 + '1')
        self.assertEqual(lines[-1], '\t1')

if __name__ == '__main__':
    unittest.main()
