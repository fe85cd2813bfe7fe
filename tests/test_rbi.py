from typegen.options import Options
from typegen.rbi import Constant, Method, Parameter
from typegen.types import Array, Nilable


class TestConstant:
    def test_describe(self):
        assert Constant("FOO", "3").describe() == 'RBI:Constant:FOO value="3"'

    def test_describe_eigen_constant(self):
        constant = Constant("FOO", Nilable("Integer"), eigen_constant=True)
        assert constant.describe() == "RBI:Constant:FOO value=Nilable<Integer> eigen_constant"

    def test_generate_rbi_with_comments(self):
        constant = Constant("FOO", "T.let(3, Integer)")
        constant.add_comment("The answer, roughly")

        assert constant.generate_rbi(1, Options()) == [
            "  # The answer, roughly",
            "  FOO = T.let(3, Integer)",
        ]

    def test_generate_rbi_with_type_value(self):
        constant = Constant("NAMES", Array("String"))
        assert constant.generate_rbi(0, Options()) == ["NAMES = T::Array[String]"]


class TestParameter:
    def test_positional(self):
        param = Parameter("a", "Integer")
        assert param.to_def_param() == "a"
        assert param.to_sig_param() == "a: Integer"

    def test_optional(self):
        param = Parameter("a", "Integer", default="1")
        assert param.to_def_param() == "a = 1"

    def test_keyword(self):
        param = Parameter("b:", Nilable("String"), default="nil")
        assert param.to_def_param() == "b: nil"
        assert param.to_sig_param() == "b: T.nilable(String)"

    def test_splat_and_block(self):
        assert Parameter("*args").to_sig_param() == "args: T.untyped"
        assert Parameter("&blk", "T.proc.void").to_sig_param() == "blk: T.proc.void"


class TestMethod:
    def test_describe_void(self):
        assert Method("foo").describe() == "RBI:Method:foo return_type=(void)"

    def test_describe_with_attributes(self):
        method = Method(
            "foo",
            [Parameter("a", "Integer"), Parameter("b")],
            return_type="String",
            abstract=True,
            type_parameters=["T"],
        )
        assert method.describe() == (
            "RBI:Method:foo parameters=2 return_type=String abstract type_parameters=1"
        )

    def test_generate_rbi_without_parameters(self):
        method = Method("foo", return_type="Integer", class_method=True)
        assert method.generate_rbi(0, Options()) == [
            "sig { returns(Integer) }",
            "def self.foo; end",
        ]

    def test_generate_rbi_with_parameters(self):
        method = Method(
            "foo",
            [Parameter("a", "Integer"), Parameter("b:", "String", default="''")],
            override=True,
        )
        method.add_comment("Does foo")

        assert method.generate_rbi(1, Options()) == [
            "  # Does foo",
            "  sig { override.params(a: Integer, b: String).void }",
            "  def foo(a, b: ''); end",
        ]

    def test_generate_rbi_breaks_long_parameter_lists(self):
        method = Method(
            "foo",
            [Parameter("a", "Integer"), Parameter("b", "String")],
            return_type="String",
            type_parameters=["U"],
        )

        assert method.generate_rbi(0, Options(break_params=2)) == [
            "sig do",
            "  type_parameters(:U).params(",
            "    a: Integer,",
            "    b: String",
            "  ).returns(String)",
            "end",
            "def foo(a, b); end",
        ]
