"""BasicObject: the top of every class hierarchy."""


def load(root):
    klass = root.define_constant("BasicObject")

    klass.define_instance_method("initialize")
    klass.define_instance_method("==").define_argument("other")
    klass.define_instance_method("!")
    klass.define_instance_method("!=").define_argument("other")
    klass.define_instance_method("equal?").define_argument("other")
    klass.define_instance_method("instance_eval").define_argument("*args")
    klass.define_instance_method("instance_exec").define_argument("*args")
    klass.define_instance_method("__send__").define_argument("name").define_argument("*args")
    klass.define_instance_method("__id__")
