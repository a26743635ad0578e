"""The option table: every ``llama-server`` option the launcher renders.

The table is walked in declaration order by
:func:`~llauncher.core.arguments.build_args`, so the order of the rows
here *is* the order of flags on the rendered command line.  Groups only
exist for help rendering; they do not affect argument order.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from llauncher.core.models import OptionKind, OptionSpec

OPTION_GROUPS: tuple[tuple[str, tuple[OptionSpec, ...]], ...] = (
    ("Basic server configuration", (
        OptionSpec("model_path", "model", "--model", OptionKind.STRING),
        OptionSpec("model_url", "model-url", "--model-url", OptionKind.STRING),
        OptionSpec("host", "host", "--host", OptionKind.STRING),
        OptionSpec("port", "port", "--port", OptionKind.INTEGER),
        OptionSpec("path", "path", "--path", OptionKind.STRING),
        OptionSpec("api_prefix", "api-prefix", "--api-prefix", OptionKind.STRING),
        OptionSpec("no_webui", "no-webui", "--no-webui", OptionKind.FLAG),
        OptionSpec("timeout", "timeout", "--timeout", OptionKind.INTEGER),
        OptionSpec("threads_http", "threads-http", "--threads-http", OptionKind.INTEGER),
    )),
    ("Model loading and configuration", (
        OptionSpec("hf_repo", "hf-repo", "--hf-repo", OptionKind.STRING),
        OptionSpec("hf_file", "hf-file", "--hf-file", OptionKind.STRING),
        OptionSpec("hf_token", "hf-token", "--hf-token", OptionKind.STRING),
        OptionSpec("offline", "offline", "--offline", OptionKind.FLAG),
    )),
    ("Performance and resource configuration", (
        OptionSpec("threads", "threads", "--threads", OptionKind.INTEGER),
        OptionSpec("threads_batch", "threads-batch", "--threads-batch", OptionKind.INTEGER),
        OptionSpec("cpu_mask", "cpu-mask", "--cpu-mask", OptionKind.STRING),
        OptionSpec("cpu_range", "cpu-range", "--cpu-range", OptionKind.STRING),
        OptionSpec("cpu_strict", "cpu-strict", "--cpu-strict", OptionKind.INTEGER),
        OptionSpec("priority", "prio", "--prio", OptionKind.INTEGER),
        OptionSpec("poll", "poll", "--poll", OptionKind.INTEGER),
        OptionSpec("context_size", "n-ctx", "--ctx-size", OptionKind.INTEGER),
        OptionSpec("batch_size", "batch-size", "--batch-size", OptionKind.INTEGER),
        OptionSpec("ubatch_size", "ubatch-size", "--ubatch-size", OptionKind.INTEGER),
        OptionSpec("gpu_layers", "n-gpu-layers", "--n-gpu-layers", OptionKind.INTEGER),
        OptionSpec("split_mode", "split-mode", "--split-mode", OptionKind.STRING),
        OptionSpec("tensor_split", "tensor-split", "--tensor-split", OptionKind.STRING),
        OptionSpec("main_gpu", "main-gpu", "--main-gpu", OptionKind.INTEGER),
        OptionSpec("numa", "numa", "--numa", OptionKind.STRING),
        OptionSpec("device", "device", "--device", OptionKind.STRING),
    )),
    ("Memory management", (
        OptionSpec("mlock", "mlock", "--mlock", OptionKind.FLAG),
        OptionSpec("no_mmap", "no-mmap", "--no-mmap", OptionKind.FLAG),
        OptionSpec("cache_type_k", "cache-type-k", "--cache-type-k", OptionKind.STRING),
        OptionSpec("cache_type_v", "cache-type-v", "--cache-type-v", OptionKind.STRING),
        OptionSpec("cache_reuse", "cache-reuse", "--cache-reuse", OptionKind.INTEGER),
        OptionSpec("swa_full", "swa-full", "--swa-full", OptionKind.FLAG),
        OptionSpec("kv_unified", "kv-unified", "--kv-unified", OptionKind.FLAG),
    )),
    ("RoPE configuration", (
        OptionSpec("rope_scaling", "rope-scaling", "--rope-scaling", OptionKind.STRING),
        OptionSpec("rope_scale", "rope-scale", "--rope-scale", OptionKind.FLOAT),
        OptionSpec("rope_freq_base", "rope-freq-base", "--rope-freq-base", OptionKind.FLOAT),
        OptionSpec("rope_freq_scale", "rope-freq-scale", "--rope-freq-scale", OptionKind.FLOAT),
    )),
    ("YaRN configuration", (
        OptionSpec("yarn_orig_ctx", "yarn-orig-ctx", "--yarn-orig-ctx", OptionKind.INTEGER),
        OptionSpec("yarn_ext_factor", "yarn-ext-factor", "--yarn-ext-factor", OptionKind.FLOAT),
        OptionSpec("yarn_attn_factor", "yarn-attn-factor", "--yarn-attn-factor", OptionKind.FLOAT),
        OptionSpec("yarn_beta_slow", "yarn-beta-slow", "--yarn-beta-slow", OptionKind.FLOAT),
        OptionSpec("yarn_beta_fast", "yarn-beta-fast", "--yarn-beta-fast", OptionKind.FLOAT),
    )),
    ("Sampling parameters", (
        OptionSpec("seed", "seed", "--seed", OptionKind.INTEGER),
        OptionSpec("samplers", "samplers", "--samplers", OptionKind.STRING),
        OptionSpec("sampler_seq", "sampler-seq", "--sampling-seq", OptionKind.STRING),
        OptionSpec("ignore_eos", "ignore-eos", "--ignore-eos", OptionKind.FLAG),
        OptionSpec("temperature", "temp", "--temp", OptionKind.FLOAT),
        OptionSpec("top_k", "top-k", "--top-k", OptionKind.INTEGER),
        OptionSpec("top_p", "top-p", "--top-p", OptionKind.FLOAT),
        OptionSpec("min_p", "min-p", "--min-p", OptionKind.FLOAT),
        OptionSpec("top_nsigma", "top-nsigma", "--top-nsigma", OptionKind.FLOAT),
        OptionSpec("typical", "typical", "--typical", OptionKind.FLOAT),
        OptionSpec("repeat_last_n", "repeat-last-n", "--repeat-last-n", OptionKind.INTEGER),
        OptionSpec("repeat_penalty", "repeat-penalty", "--repeat-penalty", OptionKind.FLOAT),
        OptionSpec("presence_penalty", "presence-penalty", "--presence-penalty", OptionKind.FLOAT),
        OptionSpec("frequency_penalty", "frequency-penalty", "--frequency-penalty", OptionKind.FLOAT),
        OptionSpec("mirostat", "mirostat", "--mirostat", OptionKind.INTEGER),
        OptionSpec("mirostat_lr", "mirostat-lr", "--mirostat-lr", OptionKind.FLOAT),
        OptionSpec("mirostat_ent", "mirostat-ent", "--mirostat-ent", OptionKind.FLOAT),
    )),
    ("Grammar and constraints", (
        OptionSpec("grammar", "grammar", "--grammar", OptionKind.STRING),
        OptionSpec("grammar_file", "grammar-file", "--grammar-file", OptionKind.STRING),
        OptionSpec("json_schema", "json-schema", "--json-schema", OptionKind.STRING),
        OptionSpec("json_schema_file", "json-schema-file", "--json-schema-file", OptionKind.STRING),
    )),
    ("Adapters and extensions", (
        OptionSpec("lora_adapters", "lora", "--lora", OptionKind.STRING_LIST),
        OptionSpec("lora_scaled", "lora-scaled", "--lora-scaled", OptionKind.STRING_LIST),
        OptionSpec("mm_proj", "mmproj", "--mmproj", OptionKind.STRING),
        OptionSpec("mm_proj_url", "mmproj-url", "--mmproj-url", OptionKind.STRING),
        OptionSpec("no_mm_proj", "no-mmproj", "--no-mmproj", OptionKind.FLAG),
        OptionSpec("no_mm_proj_offload", "no-mmproj-offload", "--no-mmproj-offload", OptionKind.FLAG),
    )),
    ("Server features", (
        OptionSpec("cont_batching", "cont-batching", "--cont-batching", OptionKind.FLAG),
        OptionSpec("no_cont_batching", "no-cont-batching", "--no-cont-batching", OptionKind.FLAG),
        OptionSpec("metrics", "metrics", "--metrics", OptionKind.FLAG),
        OptionSpec("slots", "slots", "--slots", OptionKind.FLAG),
        OptionSpec("no_slots", "no-slots", "--no-slots", OptionKind.FLAG),
        OptionSpec("slot_save_path", "slot-save-path", "--slot-save-path", OptionKind.STRING),
        OptionSpec("slot_prompt_similarity", "slot-prompt-similarity", "--slot-prompt-similarity", OptionKind.FLOAT),
        OptionSpec("swa_checkpoints", "swa-checkpoints", "--swa-checkpoints", OptionKind.INTEGER),
    )),
    ("Authentication and security", (
        OptionSpec("api_key", "api-key", "--api-key", OptionKind.STRING),
        OptionSpec("api_key_file", "api-key-file", "--api-key-file", OptionKind.STRING),
        OptionSpec("ssl_key_file", "ssl-key-file", "--ssl-key-file", OptionKind.STRING),
        OptionSpec("ssl_cert_file", "ssl-cert-file", "--ssl-cert-file", OptionKind.STRING),
    )),
    ("Chat and template configuration", (
        OptionSpec("chat_template", "chat-template", "--chat-template", OptionKind.STRING),
        OptionSpec("chat_template_file", "chat-template-file", "--chat-template-file", OptionKind.STRING),
        OptionSpec("chat_template_kwargs", "chat-template-kwargs", "--chat-template-kwargs", OptionKind.STRING),
        OptionSpec("jinja", "jinja", "--jinja", OptionKind.FLAG),
        OptionSpec("no_prefill_assistant", "no-prefill-assistant", "--no-prefill-assistant", OptionKind.FLAG),
        OptionSpec("reasoning_format", "reasoning-format", "--reasoning-format", OptionKind.STRING),
        OptionSpec("reasoning_budget", "reasoning-budget", "--reasoning-budget", OptionKind.INTEGER),
    )),
    ("Special use cases", (
        OptionSpec("embedding", "embedding", "--embedding", OptionKind.FLAG),
        OptionSpec("reranking", "reranking", "--reranking", OptionKind.FLAG),
        OptionSpec("pooling", "pooling", "--pooling", OptionKind.STRING),
    )),
    ("Logging", (
        OptionSpec("verbose", "verbose", "--verbose", OptionKind.FLAG),
        OptionSpec("log_disable", "log-disable", "--log-disable", OptionKind.FLAG),
        OptionSpec("log_file", "log-file", "--log-file", OptionKind.STRING),
        OptionSpec("log_colors", "log-colors", "--log-colors", OptionKind.FLAG),
        OptionSpec("log_verbosity", "log-verbosity", "--log-verbosity", OptionKind.INTEGER),
        OptionSpec("log_prefix", "log-prefix", "--log-prefix", OptionKind.FLAG),
        OptionSpec("log_timestamps", "log-timestamps", "--log-timestamps", OptionKind.FLAG),
    )),
    ("Prediction and generation", (
        OptionSpec("predict", "n-predict", "--predict", OptionKind.INTEGER),
        OptionSpec("reverse_prompt", "reverse-prompt", "--reverse-prompt", OptionKind.STRING),
        OptionSpec("special", "special", "--special", OptionKind.FLAG),
        OptionSpec("no_warmup", "no-warmup", "--no-warmup", OptionKind.FLAG),
        OptionSpec("no_context_shift", "no-context-shift", "--no-context-shift", OptionKind.FLAG),
        OptionSpec("context_shift", "context-shift", "--context-shift", OptionKind.FLAG),
        OptionSpec("keep", "keep", "--keep", OptionKind.INTEGER),
    )),
    ("Speculative decoding", (
        OptionSpec("model_draft", "model-draft", "--model-draft", OptionKind.STRING),
        OptionSpec("threads_draft", "threads-draft", "--threads-draft", OptionKind.INTEGER),
        OptionSpec("threads_batch_draft", "threads-batch-draft", "--threads-batch-draft", OptionKind.INTEGER),
        OptionSpec("context_size_draft", "ctx-size-draft", "--ctx-size-draft", OptionKind.INTEGER),
        OptionSpec("device_draft", "device-draft", "--device-draft", OptionKind.STRING),
        OptionSpec("gpu_layers_draft", "n-gpu-layers-draft", "--gpu-layers-draft", OptionKind.INTEGER),
        OptionSpec("draft_max", "draft-max", "--draft-max", OptionKind.INTEGER),
        OptionSpec("draft_min", "draft-min", "--draft-min", OptionKind.INTEGER),
        OptionSpec("draft_pmin", "draft-p-min", "--draft-p-min", OptionKind.FLOAT),
    )),
)

OPTIONS: tuple[OptionSpec, ...] = tuple(
    spec for _title, specs in OPTION_GROUPS for spec in specs
)
"""Flat option table in declaration order."""

OPTIONS_BY_NAME: Mapping[str, OptionSpec] = MappingProxyType(
    {spec.name: spec for spec in OPTIONS}
)

OPTIONS_BY_KEY: Mapping[str, OptionSpec] = MappingProxyType(
    {spec.key: spec for spec in OPTIONS}
)
