from data_designer.plugins.plugin import Plugin, PluginType

code_audit_plugin = Plugin(
    config_qualified_name="data_designer_code_audit.config.CodeAuditColumnConfig",
    impl_qualified_name="data_designer_code_audit.generator.CodeAuditColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
