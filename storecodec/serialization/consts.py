# Copyright 2026 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# fixed-size integers
INT32_BYTE_SIZE = 4
INT64_BYTE_SIZE = 8

# packed integers default to 64-bit values, which take at most 10 LEB128 groups
DEFAULT_PACKED_INT_BITS = 64

# the UTF-8 text length prefix is a fixed-size unsigned big-endian integer
UTF8_LENGTH_PREFIX_SIZE = 4
UTF8_MAX_LENGTH = 2**(UTF8_LENGTH_PREFIX_SIZE * 8) - 1
