"""NameError."""


def load(root):
    klass = root.define_constant("NameError").inherits("StandardError")

    klass.define_instance_method("initialize").define_argument("*args")
    klass.define_instance_method("name")
    klass.define_instance_method("receiver")
