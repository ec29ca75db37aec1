def load(root):
    klass = root.define_constant("Integer").inherits("Numeric")

    klass.define_method("sqrt").define_argument("number")

    for name in ("chr", "even?", "odd?", "pred", "succ", "next", "to_s"):
        klass.define_instance_method(name)

    klass.define_instance_method("times")
    klass.define_instance_method("upto").define_argument("limit")
    klass.define_instance_method("downto").define_argument("limit")
    klass.define_instance_method("gcd").define_argument("other")
    klass.define_instance_method("lcm").define_argument("other")
