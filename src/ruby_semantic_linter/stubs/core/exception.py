"""Exception: root of the error hierarchy."""


def load(root):
    klass = root.define_constant("Exception").inherits("Object")

    klass.define_method("exception").define_argument("*args")

    klass.define_instance_method("initialize").define_argument("*args")
    klass.define_instance_method("==").define_argument("other")
    klass.define_instance_method("backtrace")
    klass.define_instance_method("cause")
    klass.define_instance_method("exception").define_argument("*args")
    klass.define_instance_method("full_message")
    klass.define_instance_method("inspect")
    klass.define_instance_method("message")
    klass.define_instance_method("set_backtrace").define_argument("backtrace")
    klass.define_instance_method("to_s")
