"""Console URLs and canned responses used across the tests."""

HOST = "bmc.example.com"
BASE_URL = f"https://{HOST}"

IDRAC7_URL = f"{BASE_URL}/software/avctKVMIOMac64.jar"
IDRAC6_URL = f"{BASE_URL}/software/jpcsc.jar"
ILO_LOGIN_URL = f"{BASE_URL}/json/login_session"
SUPERMICRO_LOGIN_URL = f"{BASE_URL}/cgi/login.cgi"
SUPERMICRO_DOWNLOAD_URL = f"{BASE_URL}/cgi/url_redirect.cgi?url_name=ikvm&url_type=jwsk"

SUPERMICRO_JNLP = """<?xml version="1.0" encoding="UTF-8"?>
<jnlp spec="1.0+" codebase="http://bmc.example.com:80/">
  <application-desc main-class="tw.com.aten.ikvm.KVMMain">
    <argument>bmc.example.com</argument>
  </application-desc>
</jnlp>
"""
