# Passthrough action identifiers, one per upstream operation
PERPLEXITY_CHAT = "conn_mod_def::GCY0iK-iGks::TKAh9sv2Ts2HJdLJc5a60A"
OPENAI_CHAT = "conn_mod_def::GDzgi1QfvM4::4OjsWvZhRxmAVuLAuWgfVA"
OPENAI_MODELS = "conn_mod_def::GDzgKWz4lIs::QK9A86ygTteGheomVw9JNg"
# Anthropic exposes messages and models under the same action
ANTHROPIC = "conn_mod_def::GDyeI7iyqgY::Hh1TshKFQXeRbeJUfVVNuw"
TAVILY_SEARCH = "conn_mod_def::GCMZGXIH9aE::u-LjTRVgSdC0O_VGbS317w"
FIRECRAWL_CRAWL_STATUS = "conn_mod_def::GClH9Ur5poM::iGbIOuOOTyKBHnSEyhykPA"
