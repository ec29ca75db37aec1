"""Object: the default superclass."""


def load(root):
    klass = root.define_constant("Object").inherits("BasicObject")

    klass.define_method("new").define_argument("*args")
    klass.define_method("allocate")
    klass.define_method("name")

    klass.define_instance_method("class")
    klass.define_instance_method("dup")
    klass.define_instance_method("clone")
    klass.define_instance_method("eql?").define_argument("other")
    klass.define_instance_method("===").define_argument("other")
    klass.define_instance_method("=~").define_argument("other")
    klass.define_instance_method("hash")
    klass.define_instance_method("inspect")
    klass.define_instance_method("instance_of?").define_argument("klass")
    klass.define_instance_method("instance_variable_get").define_argument("name")
    klass.define_instance_method("instance_variable_set").define_argument("name").define_argument("value")
    klass.define_instance_method("is_a?").define_argument("klass")
    klass.define_instance_method("kind_of?").define_argument("klass")
    klass.define_instance_method("method").define_argument("name")
    klass.define_instance_method("methods")
    klass.define_instance_method("nil?")
    klass.define_instance_method("object_id")
    klass.define_instance_method("respond_to?").define_argument("name")
    klass.define_instance_method("send").define_argument("name").define_argument("*args")
    klass.define_instance_method("tap")
    klass.define_instance_method("to_s")
