def load(root):
    klass = root.define_constant("Regexp").inherits("Object")

    klass.define_method("new").define_argument("pattern").define_argument("*args")
    klass.define_method("escape").define_argument("string")
    klass.define_method("union").define_argument("*patterns")

    klass.define_instance_method("==").define_argument("other")
    klass.define_instance_method("=~").define_argument("string")
    klass.define_instance_method("match").define_argument("string")
    klass.define_instance_method("match?").define_argument("string")
    klass.define_instance_method("source")
