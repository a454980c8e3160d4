import pytest

from ts_model_codegen.pipeline.config import AnnotationMode, CodeGeneratorConfig, OutputConfig, OutputMode


class TestCodeGeneratorConfig:
    def test_defaults(self):
        config = CodeGeneratorConfig()
        assert config.annotation_mode == AnnotationMode.ON
        assert config.use_annotations
        assert config.output_root == "ts-model"
        assert config.relation_field_prefix == "otm_"
        assert config.output == OutputConfig(mode=OutputMode.FORCE, atomic_write=True)

    def test_from_dict(self):
        config = CodeGeneratorConfig.from_dict(
            {
                "annotation_mode": "off",
                "output_root": "src/models",
                "indent": "\t",
                "allow_duplicate_names": True,
                "output": {"mode": "error", "atomic_write": False},
                "unknown_option": 1,
            }
        )
        assert config.annotation_mode == AnnotationMode.OFF
        assert not config.use_annotations
        assert config.output_root == "src/models"
        assert config.indent == "\t"
        assert config.allow_duplicate_names
        assert config.output == OutputConfig(mode=OutputMode.ERROR_IF_EXISTS, atomic_write=False)
        assert not hasattr(config, "unknown_option")

    @pytest.mark.parametrize("value, expected", [(True, AnnotationMode.ON), (False, AnnotationMode.OFF), ("on", AnnotationMode.ON)])
    def test_annotation_mode_values(self, value, expected):
        assert CodeGeneratorConfig.from_dict({"annotation_mode": value}).annotation_mode == expected

    def test_invalid_annotation_mode(self):
        with pytest.raises(ValueError):
            CodeGeneratorConfig.from_dict({"annotation_mode": "sometimes"})

    def test_round_trip(self):
        config = CodeGeneratorConfig(annotation_mode=AnnotationMode.OFF, table_folder="tables")
        assert CodeGeneratorConfig.from_dict(config.to_dict()) == config

    @pytest.mark.parametrize("key", ["to_dict", "from_dict", "use_annotations", "__class__"])
    def test_only_declared_options_are_applied(self, key):
        config = CodeGeneratorConfig.from_dict({key: 1})
        assert config == CodeGeneratorConfig()
        assert config.to_dict() == CodeGeneratorConfig().to_dict()
        assert config.use_annotations

    def test_invalid_output_mode(self):
        with pytest.raises(ValueError):
            CodeGeneratorConfig.from_dict({"output": {"mode": "append"}})

    def test_output_must_be_an_object(self):
        with pytest.raises(ValueError):
            CodeGeneratorConfig.from_dict({"output": "force"})
